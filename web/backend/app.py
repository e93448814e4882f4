#!/usr/bin/env python3
"""
Compatibility Trigger Service - FastAPI Application

Exposes the fire-and-forget trigger for compatibility runs.

Usage:
    python main.py serve

Then call:
    - http://localhost:10000/calculate-compatibility?userId=<id>
    - http://localhost:10000/health - Health check
    - http://localhost:10000/docs - API Documentation (Swagger UI)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from core.config_loader import get_config
from database.database import dispose_engine
from .exceptions import (
    ServiceException,
    service_exception_handler,
    http_exception_handler,
    general_exception_handler
)
from .models.responses import HealthResponse
from .routers import compatibility_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Release pooled database connections on shutdown."""
    yield

    logger.info("Shutting down compatibility service")
    dispose_engine()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Compatibility API",
        description="Triggers answer-overlap compatibility runs",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )

    # Register exception handlers
    app.add_exception_handler(ServiceException, service_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(compatibility_router)

    @app.get("/health", response_model=HealthResponse)
    def health_check():
        """Health check endpoint."""
        return HealthResponse(status="healthy", service="compatibility")

    return app


app = create_app()


def main():
    """Run the web server."""
    import uvicorn

    config = get_config()
    logger.info(f"Starting Compatibility Server on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )

