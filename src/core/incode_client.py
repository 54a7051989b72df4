"""
Incode omni API client

Thin async wrapper around the four upstream endpoints the gateway uses:
- /omni/start
- /omni/onboarding-url
- /omni/get/score
- /omni/get/onboarding/status

All failures (transport, non-2xx, unparseable body) surface as UpstreamError.
"""

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from src.config.settings import Settings
from src.models.onboarding import (
    SessionStartResult,
    OnboardingUrlResult,
    ScoreResult,
    OnboardingStatusResult,
)

logger = logging.getLogger(__name__)

HARDWARE_ID_HEADER = "X-Incode-Hardware-Id"

ModelT = TypeVar("ModelT", bound=BaseModel)


class UpstreamError(Exception):
    """Raised when a call to the Incode API fails for any reason."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class IncodeClient:
    """
    Async client for the Incode omni API.

    The API key and version headers are attached to every request;
    the hardware id header is set per call since it carries either a
    session token or the admin token.
    """

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self.client = httpx.AsyncClient(
            base_url=settings.api_url.rstrip("/"),
            headers={
                "x-api-key": settings.api_key,
                "api-version": settings.api_version,
            },
            timeout=settings.upstream_timeout_seconds,
            transport=transport,
        )

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    # =========================================================================
    # UPSTREAM CALLS
    # =========================================================================

    async def start_session(self) -> SessionStartResult:
        """Create a new onboarding session for the configured flow."""
        payload = {
            "configurationId": self.settings.flow_id,
            "countryCode": self.settings.session_country_code,
            "language": self.settings.session_language,
        }
        return await self._request(
            "POST", "/omni/start", SessionStartResult, json=payload,
        )

    async def get_onboarding_url(self, token: str) -> OnboardingUrlResult:
        """Fetch the hosted onboarding URL for a session."""
        return await self._request(
            "GET",
            "/omni/onboarding-url",
            OnboardingUrlResult,
            params={"clientId": self.settings.client_id},
            headers={HARDWARE_ID_HEADER: token},
        )

    async def get_score(self, interview_id: str, token: str) -> ScoreResult:
        """Fetch the score of a session using the session's own token."""
        return await self._request(
            "GET",
            "/omni/get/score",
            ScoreResult,
            params={"id": interview_id},
            headers={HARDWARE_ID_HEADER: token},
        )

    async def get_onboarding_status(self, interview_id: str, token: str) -> OnboardingStatusResult:
        """Fetch the onboarding status of a session."""
        return await self._request(
            "GET",
            "/omni/get/onboarding/status",
            OnboardingStatusResult,
            params={"id": interview_id},
            headers={HARDWARE_ID_HEADER: token},
        )

    # =========================================================================
    # HELPERS
    # =========================================================================

    async def _request(
        self,
        method: str,
        path: str,
        model: type[ModelT],
        **kwargs: Any,
    ) -> ModelT:
        """
        Send a request and parse the body into the given model.

        Args:
            method: HTTP method
            path: Path relative to the configured API URL
            model: Pydantic model for the response body
            **kwargs: Passed through to httpx (json, params, headers)

        Returns:
            Parsed response model

        Raises:
            UpstreamError: On transport errors, non-2xx status or bad body
        """
        logger.info(f"Calling {path}")

        try:
            response = await self.client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            request = e.request
            status = e.response.status_code
            message = f"{status} {e.response.reason_phrase} from {request.method} {request.url}"
            logger.error(f"Incode API error: {message}")
            raise UpstreamError(message, status_code=status) from e
        except (httpx.HTTPError, UnicodeEncodeError) as e:
            # non-ASCII header values fail while httpx builds the request
            message = str(e) or e.__class__.__name__
            logger.error(f"Incode API request to {path} failed: {message}")
            raise UpstreamError(message) from e

        try:
            return model.model_validate(response.json())
        except ValueError as e:
            message = f"Failed to parse upstream response from {path}: {e}"
            logger.error(message)
            raise UpstreamError(message, status_code=response.status_code) from e
