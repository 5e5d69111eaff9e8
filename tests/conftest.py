"""
Shared pytest fixtures for key store tests.
"""

import random

import pytest

from keytree.models.linearcontainers import Queue, Stack
from keytree.models.node import NodeArena
from keytree.models.sortedcontainers import BinarySearchTree

SAMPLE_KEYS = [50, 30, 70, 20, 40, 60, 80]


@pytest.fixture
def tree():
    """Provide an empty tree that is torn down after the test."""
    with BinarySearchTree() as t:
        yield t


@pytest.fixture
def sample_tree():
    """Provide the complete three-level tree 50/30,70/20,40,60,80."""
    with BinarySearchTree(SAMPLE_KEYS) as t:
        yield t


@pytest.fixture
def arena():
    """Provide a fresh NodeArena."""
    return NodeArena()


@pytest.fixture
def stack():
    """Provide an empty Stack."""
    return Stack()


@pytest.fixture
def queue():
    """Provide an empty Queue."""
    return Queue()


@pytest.fixture
def rng():
    """Provide a seeded random generator for reproducible key sequences."""
    return random.Random(1234)
