"""Shared FastAPI dependencies."""

from fastapi import HTTPException, Request, status

from vesting_engine.core.engine import VestingEngine
from vesting_engine.models.config import VestingEngineConfig


def get_engine(request: Request) -> VestingEngine:
    """Vesting engine bound to the application."""
    engine = getattr(request.app.state, "engine", None)
    if engine is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Vesting engine not initialized"
        )
    return engine


def get_settings(request: Request) -> VestingEngineConfig:
    """Application settings."""
    return get_engine(request).config
