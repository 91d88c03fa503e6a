# api/schemas/book.py
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt

# Bounds of the SQL INTEGER column
INT64_MIN = -2**63
INT64_MAX = 2**63 - 1

class BookCreate(BaseModel):
    name: str = Field(min_length=1)
    position: StrictInt = Field(ge=INT64_MIN, le=INT64_MAX)

class BookSchema(BaseModel):
    # The ORM column is ``id``; clients see it as ``book_id``
    book_id: int = Field(validation_alias=AliasChoices('book_id', 'id'))
    name: str
    position: int
    done: bool
    collection_id: int

    model_config = ConfigDict(from_attributes=True)
