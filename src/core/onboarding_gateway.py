"""
Onboarding Gateway

Maps the frontend-facing operations onto Incode API calls and reshapes
the responses. Every upstream failure is normalized to
{"error": <message>, "success": False}.
"""

import logging
from datetime import datetime
from typing import Any

from src.config.settings import Settings
from src.core.incode_client import IncodeClient, UpstreamError
from src.models.onboarding import WebhookPayload

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_response_error(error: Exception) -> dict[str, Any]:
    """Normalized error body returned to the frontend."""
    return {
        "error": str(error),
        "success": False,
    }


class OnboardingGateway:
    """
    Frontend-facing onboarding operations.

    Credential use is fixed per operation:
    - score lookups use the caller's session token
    - status lookups always use the configured admin token
    """

    def __init__(self, settings: Settings, client: IncodeClient):
        self.settings = settings
        self.client = client

    async def close(self):
        await self.client.close()

    async def start_session(self) -> dict[str, Any]:
        """Create a session and return its interview id and token."""
        try:
            session = await self.client.start_session()
        except UpstreamError as e:
            logger.error(f"Failed to start session: {e}")
            return build_response_error(e)

        return {
            "interviewId": session.interviewId,
            "token": session.token,
        }

    async def create_session_with_onboarding_url(self) -> dict[str, Any]:
        """Create a session, then fetch its hosted onboarding URL."""
        try:
            session = await self.client.start_session()
            onboarding = await self.client.get_onboarding_url(session.token)
        except UpstreamError as e:
            logger.error(f"Failed to create session with onboarding URL: {e}")
            return build_response_error(e)

        return {
            "interviewId": session.interviewId,
            "token": session.token,
            "url": onboarding.url,
            "success": True,
        }

    async def fetch_score(self, interview_id: str, token: str) -> dict[str, Any]:
        """Get the overall score status of a session."""
        try:
            score = await self.client.get_score(interview_id, token)
        except UpstreamError as e:
            logger.error(f"Failed to fetch score for {interview_id}: {e}")
            return build_response_error(e)

        return {
            "score": score.overall_status,
            "success": True,
        }

    async def fetch_onboarding_status(self, interview_id: str) -> dict[str, Any]:
        """Get the onboarding status of a session using the admin token."""
        try:
            status = await self.client.get_onboarding_status(
                interview_id, self.settings.admin_token
            )
        except UpstreamError as e:
            logger.error(f"Failed to fetch onboarding status for {interview_id}: {e}")
            return build_response_error(e)

        return {
            "onboardingStatus": status.onboardingStatus,
            "success": True,
        }

    def handle_webhook(self, payload: WebhookPayload) -> dict[str, Any]:
        """
        Stamp an inbound webhook payload and echo it back.

        The payload is not validated and the sender is not authenticated.
        """
        response = {
            "timeStamp": datetime.now().strftime(TIMESTAMP_FORMAT),
            "data": payload,
        }
        logger.info(f"Webhook received: {response}")
        return response
