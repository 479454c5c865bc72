"""
Storage layer for users, contact submissions and button clicks.

Views never touch the ORM directly; they receive a storage instance built at
startup (see ``core.apps.CoreConfig``).
"""

from .base import BaseStorage
from .database import DatabaseStorage
from .memory import InMemoryStorage

__all__ = [
    'BaseStorage',
    'DatabaseStorage',
    'InMemoryStorage',
]
