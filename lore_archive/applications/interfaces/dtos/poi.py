import uuid
from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, StringConstraints

Trimmed = Annotated[str, StringConstraints(strip_whitespace=True)]


class PoiSchema(BaseModel):
    name: Optional[Trimmed] = None
    desc: Optional[Trimmed] = None
    type: Optional[Trimmed] = None


class PoiPublic(BaseModel):
    id: uuid.UUID
    name: Optional[str] = None
    desc: Optional[str] = None
    type: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)
