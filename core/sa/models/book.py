# core/sa/models/book.py
from sqlalchemy import Integer, String, Boolean, ForeignKey, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Book(Base, TimestampMixin):
    __tablename__ = 'book'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    done: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    # Not enforced on SQLite; books may point at a collection that has no row
    collection_id: Mapped[int] = mapped_column(Integer, ForeignKey('collection.id'), nullable=False)

    # Relationships
    collection = relationship('Collection', back_populates='books')

    __table_args__ = (
        Index('idx_book_collection_position', 'collection_id', 'position'),
    )

    def toggle(self) -> bool:
        """Flip the done flag and return the new value."""
        self.done = not self.done
        return self.done

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, name='{self.name}', position={self.position}, done={self.done})>"
