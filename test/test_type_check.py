import unittest
from collections import OrderedDict
from types import MappingProxyType
from layered_map.type_check import is_mapping_like, is_sequence
from layered_map.layered_dict import LayeredDict


class Lookup:
	def __init__(self):
		self._data = {'a': 1}

	def __getitem__(self, key):
		return self._data[key]

	def __contains__(self, key):
		return key in self._data

	def __iter__(self):
		return iter(self._data)


class NoContains:
	def __getitem__(self, key):
		raise KeyError(key)

	def __iter__(self):
		return iter(())


class TestTypeCheck(unittest.TestCase):
	def test_mappings(self):
		self.assertTrue(is_mapping_like({}))
		self.assertTrue(is_mapping_like(OrderedDict(a=1)))
		self.assertTrue(is_mapping_like(MappingProxyType({'a': 1})))
		self.assertTrue(is_mapping_like(LayeredDict()))

	def test_duck_typed_mapping(self):
		self.assertTrue(is_mapping_like(Lookup()))
		self.assertFalse(is_mapping_like(NoContains()))

	def test_sequences_are_rejected(self):
		for value in ([], (), 'abc', b'abc', bytearray(b'abc'), range(3)):
			self.assertTrue(is_sequence(value))
			self.assertFalse(is_mapping_like(value))

	def test_scalars_are_rejected(self):
		for value in (None, 1, 1.5, object(), {1, 2}):
			self.assertFalse(is_mapping_like(value))

	def test_classes_are_rejected(self):
		for value in (dict, list, OrderedDict, Lookup, LayeredDict):
			self.assertFalse(is_mapping_like(value))

	def test_instance_attributes_do_not_count(self):
		obj = NoContains()
		obj.__contains__ = lambda key: False
		self.assertFalse(is_mapping_like(obj))


if __name__ == '__main__':
	unittest.main()
