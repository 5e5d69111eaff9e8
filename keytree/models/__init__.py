"""
Data models for the key store.
"""

from keytree.models.exceptions import InvalidKeyError, StaleHandleError
from keytree.models.node import Node, NodeArena

__all__ = [
    "InvalidKeyError",
    "StaleHandleError",
    "Node",
    "NodeArena",
]
