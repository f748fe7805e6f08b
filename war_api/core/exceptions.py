"""
Custom exceptions and exception handlers for the WAR API Service.
"""
from fastapi import Request, status
from fastapi.responses import PlainTextResponse

from war_api.core.logging import logger


class ServiceError(Exception):
    """Base class for service exceptions."""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class PortInUseError(ServiceError):
    """Exception raised when the listening address cannot be bound."""
    def __init__(self, host: str, port: int, reason: str = "address already in use"):
        super().__init__(f"Cannot bind {host}:{port}: {reason}")
        self.host = host
        self.port = port


# Exception handlers

async def generic_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Handler for unhandled exceptions."""
    logger.opt(exception=exc).error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc}"
    )
    return PlainTextResponse(
        "Internal Server Error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
