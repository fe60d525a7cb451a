"""Hash tables with different collision strategies, each counting its probes."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from hashbench.hashing import wrap

HashFunc = Callable[[int, int], int]

_DELETED = object()


class _ProbeCountingTable:
    """Shared state: size, hash function and probe counters."""

    def __init__(self, size: int, hash_func: HashFunc) -> None:
        if size < 1:
            raise ValueError(f"table size must be positive, got {size}")
        self.size = size
        self.hash_func = hash_func
        self.insert_probes = 0
        self.remove_probes = 0

    def _home(self, key: int) -> int:
        return wrap(self.hash_func(key, self.size), self.size)


class _OpenAddressingTable(_ProbeCountingTable):
    """Open addressing with tombstones over a given probe sequence."""

    def __init__(self, size: int, hash_func: HashFunc) -> None:
        super().__init__(size, hash_func)
        self._slots: list[object] = [None] * size

    def _insert_along(self, key: int, probes: Iterable[int]) -> bool:
        for idx in probes:
            self.insert_probes += 1
            slot = self._slots[idx]
            if slot is None or slot is _DELETED:
                self._slots[idx] = key
                return True
            if slot == key:
                return False
        return False

    def _remove_along(self, key: int, probes: Iterable[int]) -> bool:
        for idx in probes:
            self.remove_probes += 1
            slot = self._slots[idx]
            if slot is None:
                return False
            if slot is not _DELETED and slot == key:
                self._slots[idx] = _DELETED
                return True
        return False


class HashTableLinear(_OpenAddressingTable):
    """Open addressing with linear probing."""

    def _probe_sequence(self, key: int) -> Iterator[int]:
        start = self._home(key)
        return ((start + i) % self.size for i in range(self.size))

    def insert(self, key: int) -> bool:
        """Insert ``key``; return False if it is already present or no slot is found."""
        return self._insert_along(key, self._probe_sequence(key))

    def remove(self, key: int) -> bool:
        """Mark ``key`` as deleted; return False if it is not found."""
        return self._remove_along(key, self._probe_sequence(key))

    def reset_probes(self) -> None:
        """Zero both probe counters."""
        self.insert_probes = 0
        self.remove_probes = 0


class HashTableQuadratic(_OpenAddressingTable):
    """Open addressing with quadratic probing (offsets 0, 1, 4, 9, ...)."""

    def _probe_sequence(self, key: int) -> Iterator[int]:
        start = self._home(key)
        return ((start + i * i) % self.size for i in range(self.size))

    def insert(self, key: int) -> bool:
        """Insert ``key``; return False if it is already present or no slot is found."""
        return self._insert_along(key, self._probe_sequence(key))

    def remove(self, key: int) -> bool:
        """Mark ``key`` as deleted; return False if it is not found."""
        return self._remove_along(key, self._probe_sequence(key))


@dataclass(slots=True)
class _RobinEntry:
    key: int
    probe: int = 0
    deleted: bool = False


class HashTableRobinHood(_ProbeCountingTable):
    """Linear probing where a key far from home displaces a key nearer to home."""

    def __init__(self, size: int, hash_func: HashFunc) -> None:
        super().__init__(size, hash_func)
        self._slots: list[_RobinEntry | None] = [None] * size

    def insert(self, key: int) -> bool:
        """Insert ``key``; return False if it is already present or the table is full."""
        start = self._home(key)
        carried = _RobinEntry(key)
        for d in range(self.size):
            self.insert_probes += 1
            idx = (start + d) % self.size
            slot = self._slots[idx]
            if slot is None or slot.deleted:
                self._slots[idx] = carried
                return True
            if slot.key == key:
                return False
            resident_distance = (idx - self._home(slot.key)) % self.size
            if resident_distance < carried.probe:
                self._slots[idx], carried = carried, slot
            carried.probe += 1
        return False

    def remove(self, key: int) -> bool:
        """Mark ``key`` as deleted; return False if it is not found."""
        start = self._home(key)
        for d in range(self.size):
            self.remove_probes += 1
            slot = self._slots[(start + d) % self.size]
            if slot is None:
                return False
            if not slot.deleted and slot.key == key:
                slot.deleted = True
                return True
        return False


class HashTableSeparateChaining(_ProbeCountingTable):
    """Each bucket holds a chain of keys; new keys go to the front."""

    def __init__(self, size: int, hash_func: HashFunc) -> None:
        super().__init__(size, hash_func)
        self._buckets: list[deque[int]] = [deque() for _ in range(size)]

    def insert(self, key: int) -> bool:
        """Insert ``key``; return False if it is already in its chain."""
        bucket = self._buckets[self._home(key)]
        for existing in bucket:
            self.insert_probes += 1
            if existing == key:
                return False
        bucket.appendleft(key)
        return True

    def remove(self, key: int) -> bool:
        """Remove ``key`` from its chain; return False if it is not there."""
        bucket = self._buckets[self._home(key)]
        for pos, existing in enumerate(bucket):
            self.remove_probes += 1
            if existing == key:
                del bucket[pos]
                return True
        return False


class TwoChoiceHashing(_ProbeCountingTable):
    """Try two hashed slots, then fall back to linear probing from the first."""

    def __init__(self, size: int, hash_a: HashFunc, hash_b: HashFunc) -> None:
        super().__init__(size, hash_a)
        self.second_hash_func = hash_b
        self._slots: list[int | None] = [None] * size

    def _candidates(self, key: int) -> tuple[int, int]:
        return (
            self._home(key),
            wrap(self.second_hash_func(key, self.size), self.size),
        )

    def insert(self, key: int) -> bool:
        """Insert ``key``; return False if met during fallback probing or the table is full."""
        first, second = self._candidates(key)
        for idx in (first, second):
            if self._slots[idx] is None:
                self._slots[idx] = key
                return True
        for step in range(1, self.size):
            self.insert_probes += 1
            idx = (first + step) % self.size
            if self._slots[idx] is None:
                self._slots[idx] = key
                return True
            if self._slots[idx] == key:
                return False
        return False

    def remove(self, key: int) -> bool:
        """Free the slot holding ``key``; return False if it is not found."""
        first, second = self._candidates(key)
        for idx in (first, second):
            self.remove_probes += 1
            if self._slots[idx] is not None and self._slots[idx] == key:
                self._slots[idx] = None
                return True
        for step in range(1, self.size):
            self.remove_probes += 1
            idx = (first + step) % self.size
            if self._slots[idx] is None:
                return False
            if self._slots[idx] == key:
                self._slots[idx] = None
                return True
        return False