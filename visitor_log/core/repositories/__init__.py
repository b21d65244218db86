"""
Visitor record storage.

- base.py: the VisitorRepository contract
- memory.py: the default in-memory implementation
"""

from .base import VisitorRepository
from .memory import InMemoryVisitorRepository

__all__ = ["InMemoryVisitorRepository", "VisitorRepository"]
