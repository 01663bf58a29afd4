import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class Species(BaseModel):
    name: str
    desc: str
    id: Optional[uuid.UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
