"""
FastAPI application factory following kkb_fastapi pattern.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import (
    analytics_router,
    companies_router,
    facilities_router,
    records_router,
)
from app.core.config import get_config
from app.services.loaders import load_record_store

logging.basicConfig(
    level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


def register_routers(app: FastAPI):
    """Register all API routers."""
    app.include_router(facilities_router)
    app.include_router(companies_router)
    app.include_router(records_router)
    app.include_router(analytics_router)


def register_exception_handlers(app: FastAPI):
    """Register JSON error handlers."""

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions."""
        logging.error(f"HTTPException occurred: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code, content={"detail": str(exc.detail)}
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle general exceptions."""
        logging.error(f"Exception occurred: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)}
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle validation errors."""
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "detail": jsonable_encoder(exc.errors()),
                "message": "Validation error",
            },
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    logging.info(f"Application startup with {app.state.record_store!r}")

    try:
        yield
    finally:
        logging.info("Application shutdown")


def get_app(config_file: str) -> FastAPI:
    """
    Application factory function.

    The dataset is loaded here rather than in the lifespan so that a broken
    data file stops the app from being created at all.

    Args:
        config_file: Configuration file name (e.g., "production.toml")

    Returns:
        Configured FastAPI application instance
    """
    config = get_config(config_file)

    app = FastAPI(
        title=config.data.get("api", {}).get(
            "title", "ESG Emissions Terminal API"
        ),
        description=config.data.get("api", {}).get(
            "description", "Filtering and aggregation of corporate emission records"
        ),
        version=config.data.get("api", {}).get("version", "1.0.0"),
        debug=config.data.get("api", {}).get("debug", False),
        lifespan=lifespan,
        generate_unique_id_function=lambda route: (
            f"{route.tags[0]}-{route.name}" if route.tags else route.name
        ),
    )

    app.state.config = config
    app.state.record_store = load_record_store(config)
    logging.info("Loaded record store")

    # Register routers
    register_routers(app)
    register_exception_handlers(app)

    # Set up CORS middleware
    origins = config.data.get("dashboard", {}).get("cors_origins", [])

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    return app
