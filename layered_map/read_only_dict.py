from collections.abc import Mapping
from layered_map.errors import UnsupportedOperation


class ReadOnlyDict(Mapping):
	"""
	A read-only view that redirects all read accesses to an externally provided mapping.

	The source stays owned and mutable by whoever handed it in; changes made there are visible
	through the view immediately. Every mutation attempt through the view raises
	UnsupportedOperation, the source is never written to.
	Note: the source only needs key lookup, containment and iteration; len() falls back to counting.
	"""

	def __init__(self, source):
		self._source = source

	@property
	def source(self):
		return self._source

	def __getitem__(self, key):
		return self._source[key]

	def __contains__(self, key):
		return key in self._source

	def __iter__(self):
		return iter(self._source)

	def __len__(self):
		try:
			return len(self._source)
		except TypeError:
			return sum(1 for _ in self._source)

	def get(self, key, default=None):
		if key in self._source:
			return self._source[key]
		return default

	def copy(self):
		"""
		Return an independent shallow dict copy of the *source*, not another view.
		"""
		return {key: self._source[key] for key in self._source}

	def __setitem__(self, key, value):
		raise UnsupportedOperation('__setitem__', self._source)

	def __delitem__(self, key):
		raise UnsupportedOperation('__delitem__', self._source)

	def clear(self):
		raise UnsupportedOperation('clear', self._source)

	def pop(self, key, default=None):
		raise UnsupportedOperation('pop', self._source)

	def popitem(self):
		raise UnsupportedOperation('popitem', self._source)

	def setdefault(self, key, default=None):
		raise UnsupportedOperation('setdefault', self._source)

	def update(self, *args, **kwargs):
		raise UnsupportedOperation('update', self._source)

	def __repr__(self):
		# Show that this is a view of another mapping
		return f"{self.__class__.__name__}({repr(self._source)})"
