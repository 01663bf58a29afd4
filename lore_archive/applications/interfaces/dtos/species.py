import uuid
from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, StringConstraints

Required = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class SpeciesSchema(BaseModel):
    name: Required
    desc: Required


class SpeciesPublic(BaseModel):
    id: uuid.UUID
    name: str
    desc: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)
