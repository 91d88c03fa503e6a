# core/sa/models/__init__.py
from .base import Base, TimestampMixin
from .collection import Collection
from .book import Book

__all__ = [
    'Base',
    'TimestampMixin',
    'Collection',
    'Book',
]
