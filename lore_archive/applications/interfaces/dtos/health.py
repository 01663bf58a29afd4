from datetime import datetime
from typing import Literal

from pydantic import BaseModel


class HealthStatus(BaseModel):
    status: str
    timestamp: datetime
    database: Literal["connected", "disconnected"]
