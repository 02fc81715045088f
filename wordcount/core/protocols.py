# wordcount/core/protocols.py
"""
Protocol interface shared by the counting backends.

The driver and the tests only depend on this contract, so the unbalanced
BST, the AVL tree and the hash table are interchangeable.
"""

from __future__ import annotations

from typing import List, Protocol, TypeVar, runtime_checkable

from wordcount.core.data_count import DataCount

K = TypeVar("K")


@runtime_checkable
class DataCounterProtocol(Protocol[K]):
    """Associative counter: at most one DataCount per distinct key."""

    def inc_count(self, key: K) -> None:
        """Create the entry with count 1 if absent, otherwise add 1."""
        ...

    def get_counts(self) -> List[DataCount[K]]:
        """
        Return every entry exactly once. Order is backend-defined.
        """
        ...

    def size(self) -> int:
        """Number of distinct keys."""
        ...
