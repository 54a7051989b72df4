"""
Core modules for the onboarding gateway

Contains:
- Incode Client: Upstream HTTP calls
- Onboarding Gateway: Response shaping and error normalization
"""

from src.core.incode_client import IncodeClient, UpstreamError
from src.core.onboarding_gateway import OnboardingGateway, build_response_error

__all__ = [
    "IncodeClient",
    "UpstreamError",
    "OnboardingGateway",
    "build_response_error",
]
