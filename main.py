import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from block_fields.config import settings
from block_fields.exception_handlers import register_exception_handlers
from block_fields.middleware.logging import StructuredLoggingMiddleware, setup_structured_logging
from block_fields.plugins.loader import initialize_plugins
from block_fields.plugins.registry import plugin_registry
from block_fields.routes import blocks, controls, icons, render

setup_structured_logging(settings.log_level, json_format=settings.log_json)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Tasks to run at application startup and shutdown."""
    logger.info("Starting up the application...")
    await initialize_plugins(plugin_registry)
    yield
    logger.info("Shutting down the application...")
    await plugin_registry.unload_all()


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    app = FastAPI(
        title=settings.app_name,
        description="Custom blocks with structured fields",
        debug=settings.debug,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(StructuredLoggingMiddleware)
    register_exception_handlers(app)

    # Admin API
    app.include_router(controls.router, prefix="/api/v1")
    app.include_router(blocks.router, prefix="/api/v1")
    app.include_router(icons.router, prefix="/api/v1")
    # Front end
    app.include_router(render.router)

    if settings.debug:
        logger.info(f"Running in {settings.environment} mode")

    return app


app = create_app()


@app.get("/health", tags=["Root"])
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.debug)
