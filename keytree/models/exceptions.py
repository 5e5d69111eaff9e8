"""
Custom exceptions for the key store.
"""

from typing import Any


class InvalidKeyError(TypeError):
    """
    Raised when a key operation receives something other than an int.

    bool is rejected even though it subclasses int.
    """

    def __init__(self, key: Any):
        """
        Initialize invalid key error.

        Args:
            key: The rejected key.
        """
        self.key = key
        super().__init__(
            f"Keys must be int, got {type(key).__name__}: {key!r}"
        )


class StaleHandleError(LookupError):
    """
    Raised when a NodeArena handle does not refer to a live node.

    This indicates a broken ownership invariant, such as freeing the
    same node twice.
    """

    def __init__(self, handle: int, reason: str):
        self.handle = handle
        self.reason = reason
        super().__init__(f"Node handle {handle} is {reason}")
