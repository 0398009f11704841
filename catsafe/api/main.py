"""
FastAPI Main Application for the Cat Safe system.

This module initializes the FastAPI application with all routes and the
startup wiring for the plant safety service.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from catsafe import __version__
from catsafe.api.endpoints.cat_safe import router as cat_safe_router
from catsafe.core.config import get_settings
from catsafe.services.plant_safety import PlantSafetyService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Load settings and build the plant safety service once per process.

    A missing OPENAI_API_KEY raises here and the application does not start.
    """
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)
    logger.info(f"Starting {settings.app_name} (model={settings.openai_model})")

    app.state.plant_safety_service = PlantSafetyService(settings)

    yield

    logger.info(f"Shutting down {settings.app_name}")
    del app.state.plant_safety_service


# Create FastAPI app
app = FastAPI(
    title="Cat Safe",
    description="Plant toxicity analysis for cats",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Register routers
app.include_router(cat_safe_router)


@app.get("/")
async def root():
    """Root endpoint with system information."""
    return {
        "message": "Cat Safe API",
        "version": __version__,
        "status": "operational",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for container health checks."""
    return {"status": "healthy", "service": "cat-safe"}


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Handle all uncaught exceptions."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "detail": str(exc)},
    )
