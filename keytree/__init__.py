"""
Iterative binary search tree key store.

This package provides an in-memory ordered set of integer keys with:
- insert(key) - O(h), duplicates ignored
- search(key) - O(h)
- remove(key) - O(h), successor replacement for two-children nodes
- in_order() / level_order() - stack/queue driven, no recursion
- teardown() - iterative release of every node

h is the tree height; the tree is not balanced.
"""

from keytree.models.linearcontainers import Queue, Stack
from keytree.models.sortedcontainers import BinarySearchTree

__all__ = ["BinarySearchTree", "Queue", "Stack"]
