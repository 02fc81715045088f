"""
registry.py
Registry of counting backends, keyed by the command line flag that
selects them. The CLI asks the registry for a fresh counter and for the
help lines it prints in the usage text.
"""

from __future__ import annotations
from typing import Callable, Dict, List, Optional, Tuple

from wordcount.core.avl_tree import AVLTree
from wordcount.core.bst import BinarySearchTree
from wordcount.core.hash_table import HashTable
from wordcount.core.protocols import DataCounterProtocol
from wordcount.utils.config_manager import CounterConfig

CounterFactory = Callable[[CounterConfig], DataCounterProtocol]


class CounterRegistry:
    """
    flag -> (factory, description).
    Factories receive the active CounterConfig; tree backends ignore it.
    """

    def __init__(self) -> None:
        self._backends: Dict[str, Tuple[CounterFactory, str]] = {}

    def add_backend(self, flag: str, factory: CounterFactory, description: str) -> None:
        """Registers a backend. Re-registering a flag replaces it."""
        self._backends[flag] = (factory, description)

    def create(self, flag: str, config: Optional[CounterConfig] = None) -> DataCounterProtocol:
        """
        Builds a new, empty counter for flag.
        Raises KeyError for an unknown flag.
        """
        factory, _ = self._backends[flag]
        return factory(config or CounterConfig())

    def flags(self) -> List[str]:
        return list(self._backends)

    def describe(self) -> List[Tuple[str, str]]:
        """(flag, description) pairs in registration order."""
        return [(flag, desc) for flag, (_, desc) in self._backends.items()]

    def __contains__(self, flag: str) -> bool:
        return flag in self._backends


def default_registry() -> CounterRegistry:
    reg = CounterRegistry()
    reg.add_backend("-b", lambda cfg: BinarySearchTree(), "Use an Unbalanced BST")
    reg.add_backend("-a", lambda cfg: AVLTree(), "Use an AVL Tree")
    reg.add_backend("-h", lambda cfg: HashTable(cfg), "Use a Hashtable")
    return reg
