import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class Book(BaseModel):
    title: str
    blurb: str
    pages: int
    publication_year: int
    characters: List[uuid.UUID] = Field(default_factory=list)
    id: Optional[uuid.UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
