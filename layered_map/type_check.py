from collections.abc import Mapping, Sequence


_MAPPING_CAPABILITIES = ('__getitem__', '__contains__', '__iter__')


def is_sequence(obj):
	"""
	Check if the object is a sequence, including str, bytes and bytearray.

	Strings and byte buffers support lookup, containment and iteration too, so they have to be
	excluded explicitly wherever a mapping is expected.
	"""
	return isinstance(obj, Sequence)


def is_mapping_like(obj):
	"""
	Check if the object can serve as a layer.

	A layer needs key lookup, containment check and iteration over its keys. Any Mapping qualifies;
	other objects qualify when their type provides all three protocols and they are neither sequences
	nor classes.

	Args:
	obj (object): The object to be checked.

	Returns:
	bool: True if the object can be read like a mapping. False otherwise.
	"""
	if isinstance(obj, Mapping):
		return True
	if obj is None or isinstance(obj, type) or is_sequence(obj):
		return False
	# special methods are looked up on the type, not the instance
	return all(callable(getattr(type(obj), name, None)) for name in _MAPPING_CAPABILITIES)
