# api/schemas/__init__.py
from .book import BookCreate, BookSchema
from .collection import CollectionCreate, CollectionSchema

__all__ = ['BookCreate', 'BookSchema', 'CollectionCreate', 'CollectionSchema']
