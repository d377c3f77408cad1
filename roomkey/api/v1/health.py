"""GET /health: liveness plus whether the database answers."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from roomkey.core.config import settings
from roomkey.core.database import check_db_connected, get_db
from roomkey.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """Always 200 while the process is up; an unreachable database shows as `database: disconnected`."""
    return HealthResponse(
        message="Server is running",
        environment=settings.APP_ENV,
        database="connected" if check_db_connected(db) else "disconnected",
    )
