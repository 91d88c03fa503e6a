import logging
from typing import List
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload
from core.sa.models import Collection

logger = logging.getLogger(__name__)

class CollectionRepository:
    """Repository for managing Collection entities."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def list_with_books(self) -> List[Collection]:
        """Get every collection in insertion order with its books loaded.

        Returns:
            List of Collection objects
        """
        stmt = (
            select(Collection)
            .options(selectinload(Collection.books))
            .order_by(Collection.id)
        )
        return list(self.session.scalars(stmt).all())

    def create_collection(self, name: str) -> Collection:
        """Create a new, empty collection.

        Args:
            name: Display name; duplicates are allowed

        Returns:
            The created Collection object
        """
        collection = Collection(name=name, books=[])
        self.session.add(collection)
        self.session.commit()
        logger.info("Created collection %s (%r)", collection.id, name)
        return collection
