"""
API Dependencies

Provides dependency injection for API endpoints.
Manages the singleton gateway instance.
"""

from src.config.settings import get_settings
from src.core.incode_client import IncodeClient
from src.core.onboarding_gateway import OnboardingGateway


# ============================================================================
# SINGLETON INSTANCES
# ============================================================================

_gateway: OnboardingGateway | None = None


async def get_gateway() -> OnboardingGateway:
    """
    Get the onboarding gateway singleton.

    Lazily creates the Incode client from the startup settings.
    """
    global _gateway

    if _gateway is None:
        settings = get_settings()
        _gateway = OnboardingGateway(settings, IncodeClient(settings))

    return _gateway


async def cleanup():
    """Cleanup resources on shutdown."""
    global _gateway

    if _gateway:
        await _gateway.close()

    _gateway = None
