"""
API endpoint modules for the onboarding gateway
"""

from src.api.endpoints import onboarding, webhook

__all__ = ["onboarding", "webhook"]
