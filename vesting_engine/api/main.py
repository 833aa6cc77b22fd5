"""FastAPI application serving vesting calculations."""

import time
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from vesting_engine.api.routers import health, vesting
from vesting_engine.core.engine import VestingEngine
from vesting_engine.exceptions import VestingEngineError
from vesting_engine.models.config import VestingEngineConfig
from vesting_engine.utils.logging import setup_logging

logger = structlog.get_logger(__name__)


def _error_body(code: str, message) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
    }


def create_app(config: Optional[VestingEngineConfig] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    
    settings = config or VestingEngineConfig()
    setup_logging(settings)
    
    app = FastAPI(
        title=settings.api_title,
        description="Locked, unlocked and projected amounts for linear vesting schedules",
        version=settings.api_version,
        debug=settings.debug,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None
    )
    app.state.engine = VestingEngine(settings)
    
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    
    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Request logging middleware."""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        
        logger.info("Request completed",
                    method=request.method,
                    path=request.url.path,
                    status_code=response.status_code,
                    process_time=process_time)
        return response
    
    app.include_router(vesting.router, prefix="/api/v1/vesting", tags=["vesting"])
    app.include_router(health.router, prefix="/api/v1/vesting", tags=["health"])
    
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions."""
        logger.warning("HTTP exception",
                       status_code=exc.status_code,
                       detail=exc.detail,
                       path=request.url.path)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(f"HTTP_{exc.status_code}", exc.detail),
        )
    
    @app.exception_handler(VestingEngineError)
    async def vesting_error_handler(request: Request, exc: VestingEngineError):
        """Engine input errors are client errors."""
        logger.warning("Rejected vesting input",
                       error=str(exc),
                       path=request.url.path)
        return JSONResponse(
            status_code=400,
            content=_error_body("INVALID_INPUT", str(exc)),
        )
    
    return app


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn
    
    settings = VestingEngineConfig()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
