"""
Stack - LIFO linked list of node handles.

Drives in-order traversal and whole-tree teardown.
"""

from keytree.interfaces.linear_container import LinearContainer


class _StackElement:
    """Link in the stack. Refers to a node handle, never owns the node."""

    __slots__ = ("handle", "next")

    def __init__(self, handle: int, next: "_StackElement | None" = None) -> None:
        self.handle = handle
        self.next = next


class Stack(LinearContainer):
    """
    LIFO container of non-owning node handles.

    push/pop/peek are O(1). pop on an empty stack returns None.
    """

    def __init__(self) -> None:
        self._top: _StackElement | None = None
        self._size: int = 0

    def push(self, handle: int) -> None:
        """Push a handle on top of the stack. O(1)"""
        self._top = _StackElement(handle, self._top)
        self._size += 1

    def pop(self) -> int | None:
        """
        Remove and return the most recently pushed handle.

        Returns:
            The top handle, or None if the stack is empty.
        """
        if self._top is None:
            return None

        element = self._top
        self._top = element.next
        self._size -= 1
        return element.handle

    def peek(self) -> int | None:
        return self._top.handle if self._top else None

    def is_empty(self) -> bool:
        return self._top is None

    def clear(self) -> int:
        """Drop remaining elements top to bottom. Referenced nodes are untouched."""
        dropped = 0
        while self.pop() is not None:
            dropped += 1
        return dropped

    def __len__(self) -> int:
        return self._size

    def __enter__(self) -> "Stack":
        return self

    def __repr__(self) -> str:
        return f"Stack(size={self._size})"
