"""
Node and NodeArena for handle-addressed tree storage.
"""

from dataclasses import dataclass

from keytree.models.exceptions import StaleHandleError


@dataclass
class Node:
    """
    Node in the binary search tree.

    Attributes:
        value: The stored key.
        left: Arena handle of the left child, or None.
        right: Arena handle of the right child, or None.
    """

    value: int
    left: int | None = None
    right: int | None = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class NodeArena:
    """
    Slot storage owning every Node of a tree.

    Nodes are addressed by integer handles (slot indexes). Freed slots go on
    a free list and are reused by later allocations, so a handle is only
    valid between its allocate() and free() calls.
    """

    def __init__(self) -> None:
        self._slots: list[Node | None] = []
        self._free: list[int] = []
        self._live: int = 0

    def allocate(self, value: int) -> int:
        """
        Create a childless node holding value.

        Args:
            value: The key for the new node.

        Returns:
            The handle of the new node.
        """
        node = Node(value=value)
        if self._free:
            handle = self._free.pop()
            self._slots[handle] = node
        else:
            handle = len(self._slots)
            self._slots.append(node)

        self._live += 1
        return handle

    def get(self, handle: int) -> Node:
        """Return the live node for handle. Raises StaleHandleError."""
        if handle < 0 or handle >= len(self._slots):
            raise StaleHandleError(handle, "out of range")

        node = self._slots[handle]
        if node is None:
            raise StaleHandleError(handle, "already freed")
        return node

    def free(self, handle: int) -> None:
        """
        Destroy the node at handle and reclaim its slot.

        Args:
            handle: Handle of a live node.

        Raises:
            StaleHandleError: If handle was never allocated or is already freed.
        """
        # get() rejects double frees
        self.get(handle)
        self._slots[handle] = None
        self._free.append(handle)
        self._live -= 1

    def live_count(self) -> int:
        return self._live

    def capacity(self) -> int:
        """Number of slots created so far, live or free."""
        return len(self._slots)

    def clear(self) -> None:
        self._slots.clear()
        self._free.clear()
        self._live = 0

    def __len__(self) -> int:
        return self._live
