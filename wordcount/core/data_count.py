# data_count.py
# (key, count) pair owned by a counting container.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Generic, TypeVar

K = TypeVar("K")


@dataclass
class DataCount(Generic[K]):
    """
    A key and how many times it has been seen.
    The key is fixed at construction; count is bumped in place by the
    container that owns the entry.
    """

    key: K
    count: int = field(default=1)

