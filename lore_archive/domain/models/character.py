import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class Character(BaseModel):
    name: str
    age: int
    species: uuid.UUID
    appears_in: List[uuid.UUID] = Field(default_factory=list)
    desc: Optional[str] = None
    id: Optional[uuid.UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
