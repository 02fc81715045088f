"""
wordcount.core

Counting containers and sorting used by the word counter.
Contains:
 - the DataCount entry type and the counter Protocol
 - three interchangeable counters (BinarySearchTree, AVLTree, HashTable)
 - stable merge sort with the report comparators
 - the flag -> backend registry
"""

from .data_count import DataCount
from .protocols import DataCounterProtocol
from .bst import BinarySearchTree
from .avl_tree import AVLTree
from .hash_table import HashTable
from .merge_sort import merge_sort, frequency_order, lexicographic_order
from .registry import CounterRegistry, default_registry

__all__ = [
    "DataCount",
    "DataCounterProtocol",
    "BinarySearchTree",
    "AVLTree",
    "HashTable",
    "merge_sort",
    "frequency_order",
    "lexicographic_order",
    "CounterRegistry",
    "default_registry",
]
