# hash_table.py
# Separate-chaining hash table used as a word counter.
# Each bucket is a list of DataCount entries whose keys map to that
# bucket. When entries / buckets exceeds the configured load factor the
# bucket array grows and every entry is rehashed into it.

from __future__ import annotations
from typing import Generic, Hashable, List, Optional, TypeVar
import logging

from wordcount.core.data_count import DataCount
from wordcount.utils.config_manager import CounterConfig

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)

Bucket = List[DataCount]


class HashTable(Generic[K]):
    """
    Hash table counter.
    config: capacity/load-factor/growth knobs (defaults: 16 buckets,
            0.75 load factor, doubling on resize)
    """

    def __init__(self, config: Optional[CounterConfig] = None) -> None:
        self.cfg = config or CounterConfig()
        self._buckets: List[Bucket] = [[] for _ in range(self.cfg.initial_capacity)]
        self._size = 0

    # insertion -----------------------------------------------------------------
    def inc_count(self, key: K) -> None:
        """Bump key's entry in its bucket chain, appending a new one if absent."""
        if key is None:
            raise TypeError("key must not be None")

        bucket = self._buckets[self._index(key, len(self._buckets))]
        for entry in bucket:
            if entry.key == key:
                entry.count += 1
                return

        bucket.append(DataCount(key, 1))
        self._size += 1
        if self.load_factor() > self.cfg.load_factor:
            self._resize(len(self._buckets) * self.cfg.growth_factor)

    # query ---------------------------------------------------------------------
    def get_counts(self) -> List[DataCount[K]]:
        """All entries, bucket by bucket. Order follows the hash layout."""
        return [DataCount(e.key, e.count) for bucket in self._buckets for e in bucket]

    def get(self, key: K) -> int:
        for entry in self._buckets[self._index(key, len(self._buckets))]:
            if entry.key == key:
                return entry.count
        return 0

    @property
    def capacity(self) -> int:
        """Current number of buckets."""
        return len(self._buckets)

    def load_factor(self) -> float:
        return self._size / len(self._buckets)

    # resizing ------------------------------------------------------------------
    def _resize(self, new_capacity: int) -> None:
        """
        Move every entry into a fresh bucket array of new_capacity.
        Entry objects are moved, not copied, so counts carry over unchanged.
        """
        old = self._buckets
        self._buckets = [[] for _ in range(new_capacity)]
        for bucket in old:
            for entry in bucket:
                self._buckets[self._index(entry.key, new_capacity)].append(entry)
        logger.debug("resized hash table %d -> %d buckets (%d entries)",
                     len(old), new_capacity, self._size)

    @staticmethod
    def _index(key: K, capacity: int) -> int:
        # python's % is non-negative for a positive modulus
        return hash(key) % capacity

    # utilities -----------------------------------------------------------------
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: K) -> bool:
        return self.get(key) > 0
