# core/sa/__init__.py
from .database import Database
from .models import Base, Collection, Book

__all__ = ['Database', 'Base', 'Collection', 'Book']
