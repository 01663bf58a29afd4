import uuid
from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Description = Annotated[str, StringConstraints(strip_whitespace=True, max_length=1000)]


class CharacterSchema(BaseModel):
    name: Name
    age: int
    species: uuid.UUID
    appears_in: List[uuid.UUID] = Field(default_factory=list)
    desc: Optional[Description] = None


class CharacterPublic(BaseModel):
    id: uuid.UUID
    name: str
    age: int
    species: uuid.UUID
    appears_in: List[uuid.UUID]
    desc: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)
