import logging
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session
from core.sa.models import Book

logger = logging.getLogger(__name__)

class BookRepository:
    """Repository for managing Book entities."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, book_id: int) -> Optional[Book]:
        return self.session.get(Book, book_id)

    def get_by_collection(self, collection_id: int) -> List[Book]:
        """Get the books of a collection sorted by position.

        The collection itself is not looked up, so an unknown id simply
        yields an empty list.

        Args:
            collection_id: The collection whose books to list

        Returns:
            List of Book objects ordered by position, then id
        """
        stmt = (
            select(Book)
            .where(Book.collection_id == collection_id)
            .order_by(Book.position, Book.id)
        )
        return list(self.session.scalars(stmt).all())

    def create_book(self, collection_id: int, name: str, position: int) -> Book:
        """Add a book to a collection. New books always start not done."""
        book = Book(
            name=name,
            position=position,
            done=False,
            collection_id=collection_id
        )
        self.session.add(book)
        self.session.commit()
        logger.info("Created book %s in collection %s", book.id, collection_id)
        return book

    def toggle_done(self, book_id: int) -> Optional[Book]:
        """Flip a book's done flag.

        Args:
            book_id: The ID of the book to toggle

        Returns:
            The updated Book object if found, None otherwise
        """
        book = self.get_by_id(book_id)
        if not book:
            return None

        book.toggle()
        self.session.commit()
        logger.debug("Book %s done=%s", book.id, book.done)
        return book
