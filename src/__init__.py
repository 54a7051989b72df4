"""
Onboarding Gateway - Incode identity verification proxy

Forwards onboarding requests from a frontend to the Incode omni API
and reshapes the responses.
"""

__version__ = "0.1.0"
