"""Health endpoint router."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from vesting_engine.api.dependencies import get_settings
from vesting_engine.api.schemas import HealthResponse
from vesting_engine.models.config import VestingEngineConfig

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: VestingEngineConfig = Depends(get_settings)):
    """Liveness check."""
    return HealthResponse(
        status="ok",
        version=settings.api_version,
        timestamp=datetime.now(timezone.utc),
    )
