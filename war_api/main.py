"""
Main application entry point for the WAR API Service.
"""
import sys
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request

from war_api.api.api import api_router
from war_api.core.config import settings
from war_api.core.exceptions import PortInUseError, generic_error_handler
from war_api.core.logging import logger, setup_logging
from war_api.core.server import ensure_port_available


# Setup application logging
setup_logging()


# Startup and shutdown events
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Handle startup and shutdown events for the application.
    """
    logger.info(f"{settings.PROJECT_NAME} {settings.VERSION} started")
    yield
    logger.info(f"{settings.PROJECT_NAME} shutting down...")


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    lifespan=lifespan
)


app.add_exception_handler(Exception, generic_error_handler)


@app.middleware("http")
async def log_request_time(request: Request, call_next):
    """
    Middleware to log request processing time.
    """
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    logger.debug(
        f"{request.method} {request.url.path} -> {response.status_code} in {process_time:.4f}s"
    )
    return response


app.include_router(api_router)


def uvicorn_log_level() -> str:
    # uvicorn has no SUCCESS level
    if settings.LOG_LEVEL == "SUCCESS":
        return "info"
    return settings.LOG_LEVEL.lower()


def main():
    """Start the embedded uvicorn server."""
    setup_logging()

    try:
        ensure_port_available(settings.HOST, settings.PORT)
    except PortInUseError as e:
        logger.error(f"{e.message}. Is another instance running? Set PORT to use a different port.")
        sys.exit(1)

    logger.info(f"Listening on http://{settings.HOST}:{settings.PORT}")
    uvicorn.run(
        "war_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG_MODE,
        log_level=uvicorn_log_level()
    )


if __name__ == "__main__":
    main()
