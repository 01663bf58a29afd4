from typing import List

from pydantic import BaseModel, ConfigDict, Field


class SpeciesStats(BaseModel):
    species: str
    count: int


class BookStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    book_id: str = Field(alias="bookId")
    title: str
    character_count: int = Field(alias="characterCount")


class CharacterBookStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    character_id: str = Field(alias="characterId")
    character_name: str = Field(alias="characterName")
    total_books: int = Field(alias="totalBooks")
    books: List[BookStats]
