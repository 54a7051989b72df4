"""
Data models for the onboarding gateway

Contains Pydantic models for Incode API responses.
"""

from src.models.onboarding import (
    IncodeModel,
    SessionStartResult,
    OnboardingUrlResult,
    OverallScore,
    ScoreResult,
    OnboardingStatusResult,
    WebhookPayload,
)

__all__ = [
    "IncodeModel",
    "SessionStartResult",
    "OnboardingUrlResult",
    "OverallScore",
    "ScoreResult",
    "OnboardingStatusResult",
    "WebhookPayload",
]
