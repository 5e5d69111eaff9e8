"""
Abstract base classes for the tree and its helper containers.
"""

from keytree.interfaces.linear_container import LinearContainer
from keytree.interfaces.ordered_key_set import OrderedKeySet

__all__ = ["LinearContainer", "OrderedKeySet"]
