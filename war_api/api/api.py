"""
Main API router that includes all endpoint groups.
"""
from fastapi import APIRouter

from war_api.api.endpoints import greetings

# Create the main API router
api_router = APIRouter()

api_router.include_router(
    greetings.router,
    tags=["Greetings"]
)
