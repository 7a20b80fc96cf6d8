"""Entry point for the FastAPI application.

This module constructs the FastAPI app, registers the exception
handlers and the receipts router, and sets up startup and shutdown
logging. Run it with ``uvicorn receipt_points.api.main:app``.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from receipt_points.api.error_handlers import (
    generic_exception_handler,
    validation_exception_handler,
)
from receipt_points.api.routes.receipts import router as receipts_router
from receipt_points.core.config import settings
from receipt_points.core.observability import init_sentry, sentry_set_tags

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    logger.info("Starting up %s (%s)...", settings.PROJECT_NAME, settings.ENVIRONMENT)
    if init_sentry("api"):
        sentry_set_tags({"version": settings.VERSION})
        logger.info("Sentry SDK initialized (api)")
    yield
    logger.info("Shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    lifespan=lifespan,
)

# Register custom exception handlers
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

# Include routers
app.include_router(receipts_router)
