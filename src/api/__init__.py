"""
API layer for the onboarding gateway

Contains FastAPI routers for:
- Session and onboarding URL creation
- Score and status lookups
- Incode webhooks
"""

from src.api.router import api_router

__all__ = ["api_router"]
