"""
wordcount

Counts word occurrences in a text file using a pluggable associative
container (unbalanced BST, AVL tree or hash table) and reports either
frequency/lexicographic orderings or the number of unique words.
"""

__version__ = "0.1.0"
