import logging
import operator
from collections.abc import MutableMapping

from layered_map.default import default_or_raise
from layered_map.errors import KeyNotFound, DuplicateKey, InvalidArgument
from layered_map.read_only_dict import ReadOnlyDict
from layered_map.type_check import is_mapping_like

logger = logging.getLogger(__name__)

_missing = object()


class LayeredDict(MutableMapping):
    """A dictionary-like object that presents a stack of mappings as one.

    Position 0 of the stack is the main layer, an empty dict created with the LayeredDict and owned
    by it. All modifications land there. Positions 1..N hold externally owned mappings (subordinate
    layers), each wrapped in a ReadOnlyDict. Keys are resolved by scanning the main layer first,
    followed by each of the subordinate layers in their order; the first layer holding the key wins.

    Subordinate layers are live views: changes their owners make are visible on the next read, so no
    resolved value is ever cached. Thread safety is the caller's responsibility; concurrent writers
    to a subordinate mapping need external synchronization.

    Attributes:
        main (ReadOnlyDict): A read-only view of the main layer.
    """

    def __init__(self, layers=None):
        """
        Initialize the LayeredDict with an empty main layer and optional subordinate layers.

        Args:
            layers (iterable of mappings, optional): Initial subordinate layers, highest priority first.
                Each one is wrapped, not copied.

        Raises:
            InvalidArgument: If one of the layers is not a mapping.
        """
        self._main = {}
        self._layers = [self._main]
        for layer in layers if layers is not None else ():
            self._layers.append(self._wrap(layer))

    def _wrap(self, layer):
        if layer is None:
            raise InvalidArgument("Layer must not be None.", layer)
        if layer is self:
            raise InvalidArgument("A LayeredDict cannot be a layer of itself.", layer)
        if not is_mapping_like(layer):
            raise InvalidArgument(f"Layer of type '{type(layer).__name__}' is not a mapping.", layer)
        return ReadOnlyDict(layer)

    @property
    def main(self):
        return ReadOnlyDict(self._main)

    # -- layer management

    def layer_count(self):
        """Number of subordinate layers, the main layer excluded."""
        return len(self._layers) - 1

    def attach_layer(self, layer, position=-1):
        """
        Insert a mapping as a new read-only subordinate layer.

        Args:
            layer (mapping): The mapping to attach. It is referenced, never copied or modified.
            position (int, optional): Slot among the subordinate layers, 0 being the highest priority.
                Negative values append the layer as lowest priority, values at or beyond
                layer_count() insert it as highest priority. Defaults to -1.

        Raises:
            InvalidArgument: If layer is None or not a mapping.
            TypeError: If position is not an integer.

        Longer cycles, such as two LayeredDicts attached to each other, are not detected; resolving a
        missing key then recurses without end.
        """
        position = operator.index(position)
        wrapped = self._wrap(layer)
        count = self.layer_count()
        if position < 0:
            self._layers.append(wrapped)
            slot = count
        elif position >= count:
            self._layers.insert(1, wrapped)
            slot = 0
        else:
            self._layers.insert(position + 1, wrapped)
            slot = position
        logger.debug("attached layer at slot %d of %d (requested %d)", slot, count + 1, position)

    def detach_layer(self, index):
        """
        Remove the subordinate layer at index. The wrapped mapping itself is left untouched.

        Returns:
            bool: True if a layer was removed, False if index was out of range.

        Raises:
            TypeError: If index is not an integer.
        """
        index = operator.index(index)
        if index < 0 or index >= self.layer_count():
            return False
        del self._layers[index + 1]
        logger.debug("detached layer at slot %d, %d left", index, self.layer_count())
        return True

    def clear_layers(self):
        """Remove all subordinate layers, keeping the main layer."""
        removed = self.layer_count()
        del self._layers[1:]
        logger.debug("cleared %d layers", removed)

    def layer_at(self, index, default=None):
        """
        Return the read-only view of the subordinate layer at index.

        Args:
            index (int): 0-based subordinate index.
            default (any|Exception, optional): Returned when index is out of range; raised instead
                if it is an exception instance. Defaults to None.
        """
        index = operator.index(index)
        if 0 <= index < self.layer_count():
            return self._layers[index + 1]
        return default_or_raise(default, message=f"no layer at index {index}")

    def layers(self):
        """Return the subordinate read-only views, highest priority first."""
        return tuple(self._layers[1:])

    def enumerate_layers(self):
        """
        Return an enumeration of the subordinate layers.

        Returns:
            list of tuple: (index, view) pairs, index being the value layer_at() and detach_layer() accept.
        """
        return list(enumerate(self._layers[1:]))

    # -- read resolution

    def __getitem__(self, key):
        """
        Retrieve a value by key, scanning the layers in priority order.

        Raises:
            KeyNotFound: If the key is not found in any layer.
        """
        for layer in self._layers:
            # containment first, so defaultdict-like layers are never asked to create the key
            if key in layer:
                return layer[key]
        raise KeyNotFound(key)

    def get(self, key, default=None):
        for layer in self._layers:
            if key in layer:
                return layer[key]
        return default

    def try_get(self, key):
        """
        Non-failing lookup that tells a missing key apart from a stored None.

        Returns:
            tuple: (True, value) if any layer holds the key, (False, None) otherwise.
        """
        value = self.get(key, _missing)
        if value is _missing:
            return False, None
        return True, value

    def __contains__(self, key):
        return any(key in layer for layer in self._layers)

    def contains_item(self, key, value):
        """True if any layer holds exactly this pair, whether or not it is shadowed."""
        return any(key in layer and layer[key] == value for layer in self._layers)

    def __iter__(self):
        """
        Iterate over the distinct keys of all layers, in priority order of first appearance.
        """
        seen = set()
        for layer in self._layers:
            for key in layer:
                if key not in seen:
                    seen.add(key)
                    yield key

    def __len__(self):
        """Return the number of distinct keys over all layers."""
        return sum(1 for _ in self)

    def merge(self):
        """
        Flatten all layers into a new, independent dict holding the resolved value for every key.
        """
        merged = {}
        for layer in self._layers:
            for key in layer:
                if key not in merged:
                    merged[key] = layer[key]
        return merged

    # -- writes, main layer only

    def __setitem__(self, key, value):
        self._main[key] = value

    def add(self, key, value):
        """
        Insert a key into the main layer.

        Keys held by subordinate layers do not block the insertion, the new value shadows them.

        Raises:
            DuplicateKey: If the main layer already holds the key.
        """
        if key in self._main:
            raise DuplicateKey(key)
        self._main[key] = value

    def try_add(self, key, value):
        """Like add(), but returns False instead of raising on a duplicate."""
        if key in self._main:
            return False
        self._main[key] = value
        return True

    def __delitem__(self, key):
        """
        Remove a key from the main layer.

        A subordinate value for the same key becomes visible again afterwards.

        Raises:
            KeyNotFound: If the main layer does not hold the key, including when only subordinate
                layers do.
        """
        if key not in self._main:
            if key in self:
                raise KeyNotFound(key, f"Key '{key}' exists only in subordinate layers and cannot be removed.")
            raise KeyNotFound(key)
        del self._main[key]

    def remove(self, key):
        """
        Remove a key from the main layer.

        Returns:
            bool: True if the main layer held the key.
        """
        if key in self._main:
            del self._main[key]
            return True
        return False

    def pop(self, key, default=_missing):
        if key in self._main:
            return self._main.pop(key)
        if default is _missing:
            raise KeyNotFound(key, f"Key '{key}' not found in the main layer.")
        return default

    def popitem(self):
        if not self._main:
            raise KeyNotFound(None, "The main layer is empty.")
        return self._main.popitem()

    def clear(self):
        """Empty the main layer. Subordinate layers are not affected."""
        self._main.clear()

    def __repr__(self):
        layers = ', '.join(repr(layer.source) for layer in self._layers[1:])
        return f"{self.__class__.__name__}(main={self._main!r}, layers=[{layers}])"
