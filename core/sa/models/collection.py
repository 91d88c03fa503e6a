# core/sa/models/collection.py
from typing import List
from sqlalchemy import Integer, String
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Collection(Base, TimestampMixin):
    __tablename__ = 'collection'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    books: Mapped[List['Book']] = relationship(
        'Book',
        back_populates='collection',
        order_by='Book.id',
    )

    def __repr__(self) -> str:
        return f"<Collection(id={self.id}, name='{self.name}')>"
