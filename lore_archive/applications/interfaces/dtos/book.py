import uuid
from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]
Blurb = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=500)]


class BookSchema(BaseModel):
    title: Title
    blurb: Blurb
    pages: int
    publication_year: int
    characters: List[uuid.UUID] = Field(default_factory=list)


class BookPublic(BaseModel):
    id: uuid.UUID
    title: str
    blurb: str
    pages: int
    publication_year: int
    characters: List[uuid.UUID]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class BookMetadata(BaseModel):
    id: str
    title: str
    blurb: str
    characters: List[str]
    publication_year: int
