"""Isoband — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from isoband.config import settings
from isoband.infrastructure.api.routes_health import router as health_router
from isoband.infrastructure.api.routes_isochrones import router as isochrones_router
from isoband.infrastructure.api.routes_map import page_router
from isoband.infrastructure.api.routes_map import router as map_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info(
        "Map starts at (%f, %f), zoom %d",
        settings.initial_latitude, settings.initial_longitude, settings.initial_zoom,
    )
    yield
    logger.info("Shutting down")


def create_app() -> FastAPI:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    app = FastAPI(
        title=settings.app_title,
        description="Concentric distance/time bands around a map point (visual approximation, no routing)",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(map_router, prefix="/api")
    app.include_router(isochrones_router, prefix="/api")
    app.include_router(page_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("isoband.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
