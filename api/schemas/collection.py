# api/schemas/collection.py
from typing import List
from pydantic import BaseModel, ConfigDict, Field

from .book import BookSchema

class CollectionCreate(BaseModel):
    name: str = Field(min_length=1)

class CollectionSchema(BaseModel):
    id: int
    name: str
    books: List[BookSchema] = []

    model_config = ConfigDict(from_attributes=True)
