"""
Queue - FIFO linked list of node handles.

Drives level-order traversal.
"""

from keytree.interfaces.linear_container import LinearContainer


class _QueueElement:
    """Link in the queue. Refers to a node handle, never owns the node."""

    __slots__ = ("handle", "next")

    def __init__(self, handle: int) -> None:
        self.handle = handle
        self.next: _QueueElement | None = None


class Queue(LinearContainer):
    """
    FIFO container of non-owning node handles.

    Both head and tail are tracked so enqueue never scans. enqueue/dequeue
    are O(1); dequeue on an empty queue returns None.
    """

    def __init__(self) -> None:
        self._head: _QueueElement | None = None
        self._tail: _QueueElement | None = None
        self._size: int = 0

    def enqueue(self, handle: int) -> None:
        """Append a handle at the tail. O(1)"""
        element = _QueueElement(handle)
        if self._tail is None:
            self._head = self._tail = element
        else:
            self._tail.next = element
            self._tail = element
        self._size += 1

    def dequeue(self) -> int | None:
        """
        Remove and return the oldest handle.

        Returns:
            The head handle, or None if the queue is empty.
        """
        if self._head is None:
            return None

        element = self._head
        self._head = element.next
        if self._head is None:
            # Last element left
            self._tail = None
        self._size -= 1
        return element.handle

    def peek(self) -> int | None:
        return self._head.handle if self._head else None

    def is_empty(self) -> bool:
        return self._head is None

    def clear(self) -> int:
        """Drop remaining elements head to tail. Referenced nodes are untouched."""
        dropped = 0
        while self.dequeue() is not None:
            dropped += 1
        return dropped

    def __len__(self) -> int:
        return self._size

    def __enter__(self) -> "Queue":
        return self

    def __repr__(self) -> str:
        return f"Queue(size={self._size})"
