"""
Sorted container implementations for the key store.
"""

from keytree.models.sortedcontainers.binary_search_tree import BinarySearchTree

__all__ = ["BinarySearchTree"]
