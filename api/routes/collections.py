# api/routes/collections.py

import logging
from typing import Annotated, List
from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from api.dependencies import get_db
from api.errors import body_error
from api.schemas.book import INT64_MAX, INT64_MIN
from api.schemas import BookCreate, BookSchema, CollectionCreate, CollectionSchema
from core.sa.repositories import BookRepository, CollectionRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/collections", tags=["collections"])

# Ids must fit the INTEGER primary key columns
RowId = Annotated[int, Path(ge=INT64_MIN, le=INT64_MAX)]

def storage_error(db: Session, detail: str) -> HTTPException:
    """Roll back the session and build a generic 500 for a failed storage call."""
    logger.exception(detail)
    db.rollback()
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)

@router.get("", response_model=List[CollectionSchema])
def get_collections(db: Session = Depends(get_db)):
    """
    List every collection in insertion order, each with its books.
    Nested books are not sorted by position; use the books endpoint for that.
    """
    try:
        return CollectionRepository(db).list_with_books()
    except SQLAlchemyError:
        raise storage_error(db, "failed to fetch collections")

@router.post("", response_model=CollectionSchema)
@body_error("name is required")
def create_collection(payload: CollectionCreate, db: Session = Depends(get_db)):
    try:
        return CollectionRepository(db).create_collection(payload.name)
    except SQLAlchemyError:
        raise storage_error(db, "failed to create collection")

@router.get("/{collection_id}/books", response_model=List[BookSchema])
def get_books_in_collection(collection_id: RowId, db: Session = Depends(get_db)):
    """
    Get the books of a collection sorted by position.

    An unknown collection id returns an empty list.
    """
    try:
        return BookRepository(db).get_by_collection(collection_id)
    except SQLAlchemyError:
        raise storage_error(db, "failed to fetch books")

@router.post("/{collection_id}/books", response_model=BookSchema)
@body_error("name and position are required")
def add_book_to_collection(
    collection_id: RowId,
    payload: BookCreate,
    db: Session = Depends(get_db)
):
    """
    Add a book to a collection. The book starts not done.

    The collection is not required to exist.
    """
    try:
        return BookRepository(db).create_book(
            collection_id=collection_id,
            name=payload.name,
            position=payload.position
        )
    except SQLAlchemyError:
        raise storage_error(db, "failed to create book")

@router.patch("/{collection_id}/books/{book_id}/toggle", response_model=BookSchema)
def toggle_book(collection_id: RowId, book_id: RowId, db: Session = Depends(get_db)):
    """
    Flip a book's done flag. The book is looked up by id alone.
    """
    try:
        book = BookRepository(db).toggle_done(book_id)
    except SQLAlchemyError:
        raise storage_error(db, "failed to update book")
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="book not found")
    return book
