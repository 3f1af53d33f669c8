"""Multimap holding an ordered list of values per key."""

from functools import cmp_to_key
from typing import Callable, Iterator, List, Optional, Tuple, TypeVar

from multimaps.base import BaseMultiMap

K = TypeVar("K")
V = TypeVar("V")


class ArrayMap(BaseMultiMap[K, V, List[V]]):
    """Multimap whose per-key collection is a list.

    Lists keep insertion order and allow duplicates. Every mutator
    creates the key if it is missing, including ``pop``, ``shift``,
    ``sort`` and ``reverse`` on a key that was never set, which leave an
    empty list behind.

    Type Parameters:
        K: The key type.
        V: The element type.

    Example:
        >>> tags = ArrayMap()
        >>> tags.push("article1", "python", "maps")
        >>> tags.unshift("article1", "draft")
        >>> tags.get("article1")
        ['draft', 'python', 'maps']
        >>> list(tags.flat_entries())
        [('article1', 'draft'), ('article1', 'python'), ('article1', 'maps')]
    """

    def get(self, key: K) -> List[V]:
        """Get the list at ``key``, or a new empty list if the key is not set."""
        values = self._map.get(key)
        if values is None:
            return []
        return values

    def push(self, key: K, *values: V) -> None:
        """Append one or more values to the end of the list at ``key``.

        Args:
            key: Key of the entry.
            *values: The value(s) to append, in order.
        """
        items = self.get(key)
        items.extend(values)
        self.set(key, items)

    def unshift(self, key: K, *values: V) -> None:
        """Insert one or more values at the front of the list at ``key``.

        The inserted values keep their argument order, so unshifting
        ``"c", "d"`` onto ``["b", "a"]`` gives ``["c", "d", "b", "a"]``.

        Args:
            key: Key of the entry.
            *values: The value(s) to prepend, in order.
        """
        items = self.get(key)
        items[:0] = values
        self.set(key, items)

    def pop(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Remove and return the last value of the list at ``key``.

        Args:
            key: Key of the entry.
            default: Returned when the list is empty.

        Returns:
            The removed value, or ``default`` if there was nothing to remove.
        """
        items = self.get(key)
        value = items.pop() if items else default
        self.set(key, items)
        return value

    def shift(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Remove and return the first value of the list at ``key``.

        Args:
            key: Key of the entry.
            default: Returned when the list is empty.

        Returns:
            The removed value, or ``default`` if there was nothing to remove.
        """
        items = self.get(key)
        value = items.pop(0) if items else default
        self.set(key, items)
        return value

    def sort(self, key: K, compare_fn: Optional[Callable[[V, V], int]] = None) -> None:
        """Sort the list at ``key`` in place.

        Args:
            key: Key of the entry.
            compare_fn: Comparator returning a negative number, zero or a
                positive number when its first argument sorts before, equal
                to or after the second. Ascending natural order when omitted.
        """
        items = self.get(key)
        if compare_fn is None:
            items.sort()
        else:
            items.sort(key=cmp_to_key(compare_fn))
        self.set(key, items)

    def reverse(self, key: K) -> None:
        """Reverse the list at ``key`` in place."""
        items = self.get(key)
        items.reverse()
        self.set(key, items)

    def flat_values(self) -> Iterator[V]:
        for values in self._map.values():
            for value in values:
                yield value

    def flat_entries(self) -> Iterator[Tuple[K, V]]:
        for key, values in self._map.items():
            for value in values:
                yield key, value
