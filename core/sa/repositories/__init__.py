# core/sa/repositories/__init__.py
from .collection import CollectionRepository
from .book import BookRepository

__all__ = ['CollectionRepository', 'BookRepository']
