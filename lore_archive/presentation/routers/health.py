from datetime import datetime, timezone

from fastapi import APIRouter

from lore_archive.applications.interfaces.dtos.health import HealthStatus
from lore_archive.infrastructure.persistence.database import get_engine, ping

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthStatus)
async def read_health():
    connected = await ping(get_engine())
    return HealthStatus(
        status="OK",
        timestamp=datetime.now(timezone.utc),
        database="connected" if connected else "disconnected",
    )
