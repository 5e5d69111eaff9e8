"""
Binary Search Tree implementation for ordered integer keys.

Unbalanced: sorted input degenerates into a linked list with O(n)
operations. Every operation is iterative, with an explicit Stack or Queue
standing in for the call stack, so deep trees never hit the recursion limit.
"""

import logging
from collections.abc import Iterable
from types import TracebackType
from typing import Any

from keytree.interfaces.ordered_key_set import OrderedKeySet
from keytree.models.exceptions import InvalidKeyError
from keytree.models.linearcontainers import Queue, Stack
from keytree.models.node import NodeArena

logger = logging.getLogger(__name__)


def _check_key(key: Any) -> int:
    if not isinstance(key, int) or isinstance(key, bool):
        raise InvalidKeyError(key)
    return key


class BinarySearchTree(OrderedKeySet):
    """
    Binary Search Tree implementation of OrderedKeySet.

    Properties maintained:
    1. Every key in a node's left subtree is less than the node's key
    2. Every key in a node's right subtree is greater than the node's key
    3. Keys are unique; duplicate inserts are ignored

    The tree owns all nodes through its NodeArena. Stacks and queues created
    during traversal only borrow node handles and are drained before the
    operation returns.
    """

    def __init__(self, keys: Iterable[int] | None = None) -> None:
        """
        Initialize the tree.

        Args:
            keys: Optional keys to insert in iteration order.
        """
        self._arena = NodeArena()
        self._root: int | None = None
        self._size: int = 0

        if keys is not None:
            for key in keys:
                self.insert(key)

    def insert(self, key: int) -> bool:
        """Insert a key. O(h). Returns False for a duplicate."""
        _check_key(key)

        if self._root is None:
            self._root = self._arena.allocate(key)
            self._size = 1
            return True

        # Find insertion point
        parent = None
        current: int | None = self._root

        while current is not None:
            parent = self._arena.get(current)
            if key < parent.value:
                current = parent.left
            elif key > parent.value:
                current = parent.right
            else:
                logger.debug(f"Duplicate key ignored: {key}")
                return False

        handle = self._arena.allocate(key)
        if key < parent.value:
            parent.left = handle
        else:
            parent.right = handle

        self._size += 1
        return True

    def search(self, key: int) -> bool:
        """Check if key exists. O(h)"""
        _check_key(key)

        current = self._root
        while current is not None:
            node = self._arena.get(current)
            if key < node.value:
                current = node.left
            elif key > node.value:
                current = node.right
            else:
                return True
        return False

    def remove(self, key: int) -> bool:
        """
        Remove a key. O(h)

        A node with two children takes its in-order successor's key, and the
        successor node is the one unlinked and freed.
        """
        _check_key(key)

        # Locate node and its parent
        parent: int | None = None
        current = self._root
        while current is not None:
            node = self._arena.get(current)
            if key == node.value:
                break
            parent = current
            current = node.left if key < node.value else node.right

        if current is None:
            logger.debug(f"Key not found for removal: {key}")
            return False

        node = self._arena.get(current)

        if node.is_leaf():
            self._replace_child(parent, current, None)
            self._arena.free(current)
        elif node.left is not None and node.right is not None:
            # Two children: find leftmost node of the right subtree
            succ_parent = current
            successor = node.right
            successor_node = self._arena.get(successor)
            while successor_node.left is not None:
                succ_parent = successor
                successor = successor_node.left
                successor_node = self._arena.get(successor)

            node.value = successor_node.value

            # Successor has no left child, splice in its right child
            self._replace_child(succ_parent, successor, successor_node.right)
            self._arena.free(successor)
        else:
            # Single child
            child = node.left if node.left is not None else node.right
            self._replace_child(parent, current, child)
            self._arena.free(current)

        self._size -= 1
        return True

    def in_order(self, start: int | None = None, end: int | None = None) -> list[int]:
        """
        Return keys in ascending order using an explicit Stack.

        Args:
            start: Start key (inclusive). If None, starts from the smallest key.
            end: End key (exclusive). If None, runs to the largest key.
        """
        if start is not None:
            _check_key(start)
        if end is not None:
            _check_key(end)

        keys: list[int] = []
        current = self._root

        with Stack() as stack:
            while current is not None or not stack.is_empty():
                # Push left path, skipping subtrees below start
                while current is not None:
                    node = self._arena.get(current)
                    if start is not None and node.value < start:
                        current = node.right
                    else:
                        stack.push(current)
                        current = node.left

                handle = stack.pop()
                if handle is None:
                    break

                node = self._arena.get(handle)
                if end is not None and node.value >= end:
                    break

                keys.append(node.value)
                current = node.right

        return keys

    def level_order(self) -> list[int]:
        """Return keys breadth-first using an explicit Queue."""
        keys: list[int] = []
        if self._root is None:
            return keys

        with Queue() as queue:
            queue.enqueue(self._root)

            while not queue.is_empty():
                node = self._arena.get(queue.dequeue())
                keys.append(node.value)

                if node.left is not None:
                    queue.enqueue(node.left)
                if node.right is not None:
                    queue.enqueue(node.right)

        return keys

    def teardown(self) -> int:
        """
        Free every node. Safe to call on an empty tree.

        Returns:
            The number of nodes freed.
        """
        freed = self._destroy_tree()
        if freed:
            logger.debug(f"Tree torn down: {freed} nodes freed")
        return freed

    def size(self) -> int:
        return self._size

    def minimum(self) -> int | None:
        """Smallest key, or None if empty."""
        current = self._root
        if current is None:
            return None

        node = self._arena.get(current)
        while node.left is not None:
            node = self._arena.get(node.left)
        return node.value

    def maximum(self) -> int | None:
        """Largest key, or None if empty."""
        current = self._root
        if current is None:
            return None

        node = self._arena.get(current)
        while node.right is not None:
            node = self._arena.get(node.right)
        return node.value

    def height(self) -> int:
        """
        Number of levels in the tree, counted with an explicit Queue.

        0 for an empty tree, 1 for a single node. Equals size() for a
        fully degenerate tree.
        """
        if self._root is None:
            return 0

        levels = 0
        with Queue() as queue:
            queue.enqueue(self._root)

            while not queue.is_empty():
                for _ in range(len(queue)):
                    node = self._arena.get(queue.dequeue())
                    if node.left is not None:
                        queue.enqueue(node.left)
                    if node.right is not None:
                        queue.enqueue(node.right)
                levels += 1

        return levels

    def _replace_child(self, parent: int | None, child: int, replacement: int | None) -> None:
        """Point parent's link to child at replacement instead."""
        if parent is None:
            self._root = replacement
            return

        parent_node = self._arena.get(parent)
        if parent_node.left == child:
            parent_node.left = replacement
        else:
            parent_node.right = replacement

    def _destroy_tree(self) -> int:
        """Free every node using an explicit Stack."""
        if self._root is None:
            # Slots left behind by remove()
            self._arena.clear()
            return 0

        freed = 0
        with Stack() as stack:
            stack.push(self._root)

            while not stack.is_empty():
                handle = stack.pop()
                node = self._arena.get(handle)

                if node.left is not None:
                    stack.push(node.left)
                if node.right is not None:
                    stack.push(node.right)

                self._arena.free(handle)
                freed += 1

        # Every node went through free(), release the slots
        self._arena.clear()
        self._root = None
        self._size = 0
        return freed

    def __enter__(self) -> "BinarySearchTree":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.teardown()

    def __del__(self) -> None:
        # __init__ may not have run to completion
        if getattr(self, "_root", None) is not None:
            self._destroy_tree()

    def __repr__(self) -> str:
        return f"BinarySearchTree(size={self._size})"
