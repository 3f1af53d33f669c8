"""Multimap holding a set of unique values per key."""

from typing import Iterator, Set, Tuple, TypeVar

from multimaps.base import BaseMultiMap

K = TypeVar("K")
V = TypeVar("V")


class SetMap(BaseMultiMap[K, V, Set[V]]):
    """Multimap whose per-key collection is a set.

    Each distinct value appears at most once per key, so values must be
    hashable. Flattened iteration follows whatever order the underlying
    sets yield. Both ``add`` and ``delete_in`` create the key if it is
    missing, even when nothing ends up in the set.

    Type Parameters:
        K: The key type.
        V: The element type.

    Example:
        >>> roles = SetMap()
        >>> roles.add("user:1", "admin", "editor")
        >>> roles.add("user:1", "admin")
        >>> roles.value_count("user:1")
        2
    """

    def get(self, key: K) -> Set[V]:
        """Get the set at ``key``, or a new empty set if the key is not set."""
        values = self._map.get(key)
        if values is None:
            return set()
        return values

    def add(self, key: K, *values: V) -> None:
        """Add one or more values to the set at ``key``.

        Values already in the set are left as they are.

        Args:
            key: Key of the entry.
            *values: The value(s) to add.
        """
        items = self.get(key)
        items.update(values)
        self.set(key, items)

    def delete_in(self, key: K, *values: V) -> None:
        """Remove one or more values from the set at ``key``.

        Values that are not in the set are ignored.

        Args:
            key: Key of the entry.
            *values: The value(s) to remove.
        """
        items = self.get(key)
        for value in values:
            items.discard(value)
        self.set(key, items)

    def flat_values(self) -> Iterator[V]:
        for values in self._map.values():
            yield from values

    def flat_entries(self) -> Iterator[Tuple[K, V]]:
        for key, values in self._map.items():
            for value in values:
                yield key, value
