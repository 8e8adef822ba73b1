"""
Neon Pig Decision Providers.

Roll/hold choices for the computer player: Gemini when a key is
configured, a fixed local rule otherwise.
"""

from __future__ import annotations

import logging

from neon_pig.ai.base import (
    CONFUSED_DECISION,
    FAILURE_DECISION,
    Decision,
    DecisionProvider,
)
from neon_pig.ai.rules import RulesDecisionProvider
from neon_pig.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def get_decision_provider(settings: Settings | None = None) -> DecisionProvider:
    """Pick the provider for the configured credential.

    Without an API key the local rule is used and Gemini is never
    contacted.
    """
    settings = settings or get_settings()
    if not settings.has_api_key:
        logger.warning("No Gemini API key found. Using simple fallback logic.")
        return RulesDecisionProvider()

    from neon_pig.ai.gemini import GeminiDecisionProvider

    return GeminiDecisionProvider(
        settings.gemini_api_key,
        settings.gemini_model,
        timeout=settings.request_timeout,
    )


__all__ = [
    "CONFUSED_DECISION",
    "FAILURE_DECISION",
    "Decision",
    "DecisionProvider",
    "RulesDecisionProvider",
    "get_decision_provider",
]
