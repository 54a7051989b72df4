"""
Onboarding API endpoints

Handles:
- Session creation
- Onboarding URL lookup
- Score and status lookups
"""

from typing import Any

from fastapi import APIRouter, Depends, Header, Query

from src.core.onboarding_gateway import OnboardingGateway
from src.api.dependencies import get_gateway

router = APIRouter()


@router.get("/start")
async def create_session(
    gateway: OnboardingGateway = Depends(get_gateway),
) -> dict[str, Any]:
    """Create a new Incode session."""
    return await gateway.start_session()


@router.get("/onboarding-url")
async def create_session_with_redirect_url(
    gateway: OnboardingGateway = Depends(get_gateway),
) -> dict[str, Any]:
    """Create a new session and return its hosted onboarding URL."""
    return await gateway.create_session_with_onboarding_url()


@router.get("/fetch-score")
async def fetch_score(
    interview_id: str = Query(..., alias="interviewId"),
    token: str = Header(..., alias="X-Token"),
    gateway: OnboardingGateway = Depends(get_gateway),
) -> dict[str, Any]:
    """Get the overall score of a session, authorized by the session token."""
    return await gateway.fetch_score(interview_id, token)


@router.get("/onboarding-status")
async def fetch_onboarding_status(
    interview_id: str = Query(..., alias="interviewId"),
    gateway: OnboardingGateway = Depends(get_gateway),
) -> dict[str, Any]:
    """Get the onboarding status of a session."""
    return await gateway.fetch_onboarding_status(interview_id)
