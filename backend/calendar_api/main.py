"""
Calendar API - FastAPI Application Entry Point.

Feature-based modular architecture:
  Each feature in calendar_api/features/ has its own router, schemas and service.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from calendar_api.config import get_settings

# ── Feature Routers ──────────────────────────────────────
from calendar_api.features.events.router import router as events_router
from calendar_api.features.config_options.router import router as config_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup & shutdown."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info(f"{settings.APP_NAME} v{settings.APP_VERSION} starting...")
    logger.info(f"Config options file: {settings.CONFIG_OPTIONS_FILE}")

    if settings.SEED_SAMPLE_DATA:
        from calendar_api.core.database import get_supabase_client
        from calendar_api.features.events.seed import seed_sample_events
        from calendar_api.features.events.service import EventStore

        seed_sample_events(EventStore(get_supabase_client(), settings.EVENTS_TABLE))

    yield
    logger.info("Shutting down...")


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies and parameters are client errors: 400, not 422."""
    logger.info(f"Rejected {request.method} {request.url.path}: {len(exc.errors())} validation error(s)")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": {
                "error": "Invalid request",
                "detail": [
                    {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
                    for err in exc.errors()
                ],
                "type": "EventValidationError",
            }
        },
    )


def create_app() -> FastAPI:
    """Application factory."""
    settings = get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Calendar events backend",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    # ── CORS ─────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # ── Register Feature Routers ─────────────────────────
    app.include_router(events_router, prefix="/api/events", tags=["Events"])
    app.include_router(config_router, prefix="/api/config", tags=["Config"])

    # ── Health Check ─────────────────────────────────────
    @app.get("/health", tags=["System"])
    async def health_check():
        return {
            "status": "healthy",
            "app": settings.APP_NAME,
            "version": settings.APP_VERSION,
        }

    return app


app = create_app()
