"""
LinearContainer abstract base class for the traversal worklists.
"""

from abc import ABC, abstractmethod
from types import TracebackType


class LinearContainer(ABC):
    """
    Abstract base class for linked worklists of node handles.

    Implementations hold non-owning handles into a NodeArena. They own only
    their own link elements, so draining a container never frees a node.

    Implementations:
    - Stack: LIFO, used by in-order traversal and teardown
    - Queue: FIFO, used by level-order traversal
    """

    @abstractmethod
    def is_empty(self) -> bool:
        """
        Check whether the container holds no handles.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of handles held. O(1)"""
        pass

    @abstractmethod
    def peek(self) -> int | None:
        """
        Return the handle that would be removed next without removing it.

        Returns:
            The next handle, or None if the container is empty.
        """
        pass

    @abstractmethod
    def clear(self) -> int:
        """
        Drop every remaining element.

        Returns:
            The number of elements dropped.
        """
        pass

    def __enter__(self) -> "LinearContainer":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.clear()
