"""
Onboarding models for the gateway

Shapes of the Incode omni API responses the gateway consumes.
Only the fields we surface are declared; anything else is ignored.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class IncodeModel(BaseModel):
    """Base for upstream bodies; numeric ids are kept as their string form."""

    model_config = ConfigDict(coerce_numbers_to_str=True)


class SessionStartResult(IncodeModel):
    """Body of POST /omni/start."""

    interviewId: str
    token: str


class OnboardingUrlResult(IncodeModel):
    """Body of GET /omni/onboarding-url."""

    url: str


class OverallScore(IncodeModel):
    status: str


class ScoreResult(IncodeModel):
    """Body of GET /omni/get/score."""

    overall: OverallScore

    @property
    def overall_status(self) -> str:
        return self.overall.status


class OnboardingStatusResult(IncodeModel):
    """Body of GET /omni/get/onboarding/status."""

    onboardingStatus: str


# Inbound webhook bodies are passed through untouched
WebhookPayload = dict[str, Any]
