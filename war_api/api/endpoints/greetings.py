"""
Static greeting endpoints.
"""
from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse


WELCOME_MESSAGE = "Welcome to Faisal's War Spring Boot API!"
HELLO_MESSAGE = "Hello from WAR project!"

router = APIRouter()


@router.get("/", response_class=PlainTextResponse, status_code=status.HTTP_200_OK)
async def home() -> str:
    """Return the welcome message."""
    return WELCOME_MESSAGE


@router.get("/hello", response_class=PlainTextResponse, status_code=status.HTTP_200_OK)
async def hello() -> str:
    return HELLO_MESSAGE
