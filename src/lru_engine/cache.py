"""Fixed-capacity key/value cache with least-recently-used eviction.

The engine is a dict index over a doubly-linked recency list. ``head`` is the
most recently used entry and ``tail`` the least recently used one; walking
``head -> tail`` through ``Entry.next`` yields entries most-recent first.

Not thread-safe. Callers sharing a cache between threads must guard it with
their own lock.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterator
from typing import Generic, TypeVar

from lru_engine.errors import LRUCapacityError, LRUMutatedDuringIteration

logger = logging.getLogger("lru_engine.cache")

DEFAULT_LIMIT = 42

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class Entry(Generic[K, V]):
    """One cached key/value pair and its position in recency order.

    Entries handed out by traversal are read-only views. Only the owning
    ``LRUCache`` relinks them, and a removed entry has both links cleared.
    """

    __slots__ = ("_key", "_value", "_prev", "_next")

    def __init__(self, key: K, value: V) -> None:
        self._key = key
        self._value = value
        self._prev: Entry[K, V] | None = None
        self._next: Entry[K, V] | None = None

    @property
    def key(self) -> K:
        return self._key

    @property
    def value(self) -> V:
        return self._value

    @property
    def prev(self) -> Entry[K, V] | None:
        """Neighbour toward the head (more recently used), or None at the head."""

        return self._prev

    @property
    def next(self) -> Entry[K, V] | None:
        """Neighbour toward the tail (less recently used), or None at the tail."""

        return self._next

    def __repr__(self) -> str:
        return f"Entry(key={self._key!r}, value={self._value!r})"


class LRUCache(Generic[K, V]):
    """A bounded mapping that evicts its least recently used entry when full.

    ``put`` and a hitting ``get`` both promote the entry to the head. Misses are
    not errors: ``get`` returns ``default`` and ``delete`` returns False.
    """

    def __init__(self, limit: int = DEFAULT_LIMIT) -> None:
        if not isinstance(limit, int) or isinstance(limit, bool):
            raise LRUCapacityError(f"limit must be an integer, got {type(limit).__name__}.")
        if limit < 1:
            raise LRUCapacityError(f"limit must be >= 1, got {limit}.")

        self._limit = limit
        self._size = 0
        self._head: Entry[K, V] | None = None
        self._tail: Entry[K, V] | None = None
        self._index: dict[K, Entry[K, V]] = {}
        # Bumped on every structural change; traversals compare against it.
        self._mutations = 0

    @property
    def size(self) -> int:
        return self._size

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def head(self) -> Entry[K, V] | None:
        """The most recently used entry, or None when empty."""

        return self._head

    @property
    def tail(self) -> Entry[K, V] | None:
        """The least recently used entry, or None when empty."""

        return self._tail

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        """Membership test. Does not count as an access."""

        return key in self._index

    def __repr__(self) -> str:
        return f"{type(self).__name__}(limit={self._limit}, size={self._size})"

    # Recency list primitives. These keep head/tail and the links consistent
    # but leave the index and size to the caller.

    def _link_head(self, entry: Entry[K, V]) -> None:
        entry._prev = None
        entry._next = self._head
        if self._head is None:
            self._tail = entry
        else:
            self._head._prev = entry
        self._head = entry

    def _unlink(self, entry: Entry[K, V]) -> None:
        if entry._prev is None:
            self._head = entry._next
        else:
            entry._prev._next = entry._next

        if entry._next is None:
            self._tail = entry._prev
        else:
            entry._next._prev = entry._prev

        entry._prev = None
        entry._next = None

    def _promote(self, entry: Entry[K, V]) -> None:
        if entry is self._head:
            return
        self._unlink(entry)
        self._link_head(entry)
        self._mutations += 1

    def _remove(self, entry: Entry[K, V]) -> None:
        self._unlink(entry)
        del self._index[entry._key]
        self._size -= 1
        self._mutations += 1

    def _evict(self) -> None:
        victim = self._tail
        assert victim is not None
        self._remove(victim)
        logger.debug("Evicted %r (limit=%d)", victim.key, self._limit)

    # Public operations.

    def put(self, key: K, value: V) -> None:
        """Insert or replace ``key`` and make it the most recently used entry.

        Replacing an existing key never evicts. Inserting a new key into a full
        cache evicts the tail first.
        """

        entry = self._index.get(key)
        if entry is not None:
            entry._value = value
            self._promote(entry)
            return

        if self._size == self._limit:
            self._evict()

        entry = Entry(key, value)
        self._link_head(entry)
        self._index[key] = entry
        self._size += 1
        self._mutations += 1

    def get(self, key: K, default: V | None = None) -> V | None:
        """Return the value for ``key`` and promote it, or ``default`` on a miss."""

        entry = self._index.get(key)
        if entry is None:
            return default
        self._promote(entry)
        return entry._value

    def delete(self, key: K) -> bool:
        """Remove ``key``. Returns False, changing nothing, if it is absent."""

        if key not in self._index:
            return False
        self._remove(self._index[key])
        return True

    def reset(self) -> None:
        """Drop every entry."""

        dropped = self._size
        self._head = None
        self._tail = None
        self._index = {}
        self._size = 0
        self._mutations += 1
        logger.debug("Reset cache, dropped %d entries", dropped)

    def __iter__(self) -> Iterator[Entry[K, V]]:
        """Yield entries most-recent first, starting from the current head.

        Raises LRUMutatedDuringIteration if the cache changes structurally
        before the traversal finishes.
        """

        mutations = self._mutations
        entry = self._head
        while entry is not None:
            yield entry
            if self._mutations != mutations:
                raise LRUMutatedDuringIteration("LRUCache changed during iteration.")
            entry = entry._next

    def for_each(self, visit: Callable[[Entry[K, V], int], object]) -> None:
        """Call ``visit(entry, position)`` for each entry, most-recent first."""

        for position, entry in enumerate(self):
            visit(entry, position)
