"""Base class shared by the multimap variants."""

from abc import ABC, abstractmethod
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    ItemsView,
    Iterator,
    KeysView,
    Optional,
    Sized,
    Tuple,
    TypeVar,
    ValuesView,
)

from multimaps.logging import get_logger

K = TypeVar("K")
V = TypeVar("V")
C = TypeVar("C", bound=Sized)

_logger = get_logger("map")


class BaseMultiMap(ABC, Generic[K, V, C]):
    """Key to collection store, independent of the collection shape.

    Each present key holds a concrete collection, which may be empty.
    Subclasses choose the collection type and supply the shape-specific
    operations (``get``, ``flat_values``, ``flat_entries``)
    together with their own mutators.

    Mutators follow a read-then-write pattern: they fetch the collection
    with :meth:`get`, change it and store it back with :meth:`set`. A key
    touched by any mutator is therefore present afterwards, even when its
    collection ended up empty. Plain reads never insert entries.

    Type Parameters:
        K: The key type.
        V: The element type.
        C: The per-key collection type.
    """

    def __init__(self, name: Optional[str] = None):
        self._name = name
        self._map: Dict[K, C] = {}
        _logger.debug("%s created: name=%s", self.__class__.__name__, name)

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def size(self) -> int:
        """Number of keys present in the map."""
        return len(self._map)

    @property
    def flat_size(self) -> int:
        """Total number of elements across all collections in the map."""
        return sum(len(collection) for collection in self._map.values())

    @abstractmethod
    def get(self, key: K) -> C:
        """Get the collection at ``key``.

        If no entry exists for ``key``, a fresh empty collection is returned
        and the map is left unchanged.
        """
        pass

    def set(self, key: K, collection: C) -> None:
        """Set the collection at ``key``, replacing any previous entry.

        The collection is stored as given, so later changes made through
        the same object are visible in the map.
        """
        self._map[key] = collection

    def has(self, key: K) -> bool:
        """Check if ``key`` has an entry, possibly an empty one."""
        return key in self._map

    def delete(self, key: K) -> bool:
        """Remove the entry at ``key``.

        Returns:
            True if the entry existed before removal, False if it did not.
        """
        if key not in self._map:
            return False
        del self._map[key]
        return True

    def clear(self) -> None:
        """Remove all entries from the map."""
        count = len(self._map)
        self._map.clear()
        _logger.debug(
            "%s cleared: name=%s, entries=%d", self.__class__.__name__, self._name, count
        )

    def keys(self) -> KeysView[K]:
        """Live view over the keys of the map, in insertion order."""
        return self._map.keys()

    def values(self) -> ValuesView[C]:
        """Live view over the collections of the map, in key order."""
        return self._map.values()

    def entries(self) -> ItemsView[K, C]:
        """Live view over the ``(key, collection)`` pairs of the map."""
        return self._map.items()

    @abstractmethod
    def flat_values(self) -> Iterator[V]:
        """Iterate over the elements in all collections of the map.

        Empty collections contribute nothing.
        """
        pass

    @abstractmethod
    def flat_entries(self) -> Iterator[Tuple[K, V]]:
        """Iterate over ``(key, element)`` pairs in all collections.

        A key is repeated once per element it holds; empty collections
        are skipped.
        """
        pass

    def for_each(self, callback: Callable[[C, K, Any], None]) -> None:
        """Call ``callback(collection, key, map)`` for each entry."""
        for key, collection in self._map.items():
            callback(collection, key, self)

    def flat_for_each(self, callback: Callable[[V, K, Any], None]) -> None:
        """Call ``callback(element, key, map)`` for each flattened entry."""
        for key, value in self.flat_entries():
            callback(value, key, self)

    def value_count(self, key: K) -> int:
        """Number of elements stored at ``key``, 0 if the key is absent."""
        collection = self._map.get(key)
        if collection is None:
            return 0
        return len(collection)

    def contains_entry(self, key: K, value: V) -> bool:
        """Check if ``value`` is in the collection at ``key``."""
        collection = self._map.get(key)
        if collection is None:
            return False
        return value in collection

    def contains_value(self, value: V) -> bool:
        """Check if ``value`` is in any collection of the map."""
        return any(value in collection for collection in self._map.values())

    def __len__(self) -> int:
        return self.size

    def __contains__(self, key: object) -> bool:
        return self.has(key)

    def __getitem__(self, key: K) -> C:
        return self.get(key)

    def __setitem__(self, key: K, collection: C) -> None:
        self.set(key, collection)

    def __delitem__(self, key: K) -> None:
        if not self.delete(key):
            raise KeyError(key)

    def __iter__(self) -> Iterator[Tuple[K, C]]:
        return iter(self.entries())

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._map == other._map

    def __repr__(self) -> str:
        if self._name is None:
            return f"{self.__class__.__name__}({self._map!r})"
        return f"{self.__class__.__name__}(name={self._name!r}, entries={self._map!r})"

    def __str__(self) -> str:
        return self.__repr__()
