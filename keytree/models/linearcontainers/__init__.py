"""
Linear container implementations used to drive non-recursive traversals.
"""

from keytree.models.linearcontainers.queue import Queue
from keytree.models.linearcontainers.stack import Stack

__all__ = ["Queue", "Stack"]
