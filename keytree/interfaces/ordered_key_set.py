"""
OrderedKeySet abstract base class for sorted integer key sets.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator


class OrderedKeySet(ABC):
    """
    Abstract base class for ordered sets of integer keys.

    Keys are unique; inserting a key already present is a no-op.

    Implementations:
    - BinarySearchTree: unbalanced, iterative, O(h) operations
    """

    @abstractmethod
    def insert(self, key: int) -> bool:
        """
        Insert a key.

        Args:
            key: The key to insert.

        Returns:
            True if the key was added, False if it was already present.
        """
        pass

    @abstractmethod
    def search(self, key: int) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to look up.

        Returns:
            True if the key exists, False otherwise.
        """
        pass

    @abstractmethod
    def remove(self, key: int) -> bool:
        """
        Remove a key.

        Args:
            key: The key to remove.

        Returns:
            True if the key was found and removed, False otherwise.
        """
        pass

    @abstractmethod
    def in_order(self, start: int | None = None, end: int | None = None) -> list[int]:
        """
        Return keys in ascending order.

        Args:
            start: Start key (inclusive). If None, starts from the smallest key.
            end: End key (exclusive). If None, runs to the largest key.

        Returns:
            Keys in ascending order.
        """
        pass

    @abstractmethod
    def level_order(self) -> list[int]:
        """Return keys breadth-first, root first, left before right."""
        pass

    @abstractmethod
    def teardown(self) -> int:
        """
        Release every key.

        Returns:
            The number of keys released. Zero on an empty set.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of keys.

        Time complexity: O(1)
        """
        pass

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int) or isinstance(key, bool):
            return False
        return self.search(key)

    def __iter__(self) -> Iterator[int]:
        return iter(self.in_order())
