import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class Poi(BaseModel):
    name: Optional[str] = None
    desc: Optional[str] = None
    type: Optional[str] = None
    id: Optional[uuid.UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
