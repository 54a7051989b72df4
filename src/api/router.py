"""
Main API router for the onboarding gateway

Aggregates all API routes and provides the main application router.
"""

from fastapi import APIRouter

from src.api.endpoints import onboarding, webhook

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(
    onboarding.router,
    tags=["Onboarding"]
)

api_router.include_router(
    webhook.router,
    tags=["Webhook"]
)
