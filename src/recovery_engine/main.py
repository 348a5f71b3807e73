"""FastAPI application for the recovery engine."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import configure_logging, get_settings
from .api.exception_handlers import register_exception_handlers
from .api.routes import recovery, trends, training


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings = get_settings()
    logger.info(f"Starting recovery-engine v{__version__}")
    logger.info(
        f"Baseline window {settings.baseline_window_days}d, "
        f"min {settings.baseline_min_readings} readings"
    )
    yield
    logger.info("Shutting down recovery-engine")


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="recovery-engine",
        description="Recovery scoring, personal baselines and health trend series",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(recovery.router, prefix="/api/v1/recovery", tags=["recovery"])
    app.include_router(trends.router, prefix="/api/v1/trends", tags=["trends"])
    app.include_router(training.router, prefix="/api/v1", tags=["training"])

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "version": __version__}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
