import uuid
from typing import List, Optional

from pydantic import BaseModel


class SpeciesCount(BaseModel):
    species_id: uuid.UUID
    species_name: Optional[str]
    count: int


class BookAppearance(BaseModel):
    book_id: uuid.UUID
    title: str
    character_count: int


class CharacterBooks(BaseModel):
    character_id: uuid.UUID
    character_name: str
    books: List[BookAppearance]
