"""
Webhook API endpoints

Receives Incode webhook notifications and echoes them back with a timestamp.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from src.core.onboarding_gateway import OnboardingGateway
from src.api.dependencies import get_gateway

router = APIRouter()


@router.post("/webhook")
async def webhook_action(
    payload: dict[str, Any] = Body(...),
    gateway: OnboardingGateway = Depends(get_gateway),
) -> dict[str, Any]:
    """
    Accept a webhook notification.

    The body is not validated beyond being a JSON object.
    """
    return gateway.handle_webhook(payload)
