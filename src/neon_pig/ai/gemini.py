"""
Neon Pig - Gemini Decision Provider

Asks a hosted Gemini model whether the computer should roll or hold.
One request per decision, no retries: any failure falls straight through
to a fixed hold decision so the game always keeps moving.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from google import genai
from google.genai import types

from neon_pig.ai.base import (
    CONFUSED_DECISION,
    FAILURE_DECISION,
    Decision,
    DecisionProvider,
)
from neon_pig.ai.prompts import build_decision_prompt
from neon_pig.engine.base import GameState

logger = logging.getLogger(__name__)

_VALID_ACTIONS = ("roll", "hold")

RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "action": types.Schema(type=types.Type.STRING, enum=list(_VALID_ACTIONS)),
        "reasoning": types.Schema(type=types.Type.STRING),
    },
    required=["action", "reasoning"],
)


class GeminiDecisionProvider(DecisionProvider):
    """Decision provider backed by the google-genai async client."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        *,
        timeout: float | None = 15.0,
        client: genai.Client | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._timeout = timeout
        self._client = client

    def _new_client(self) -> genai.Client:
        return genai.Client(api_key=self._api_key)

    async def decide(self, state: GameState) -> Decision:
        """Request a decision; never raises."""
        try:
            text = await self._request(build_decision_prompt(state))
            payload = json.loads(text or "{}")
        except Exception:
            logger.exception("Gemini decision request failed")
            return FAILURE_DECISION

        return parse_decision(payload)

    async def _request(self, prompt: str) -> str | None:
        if self._client is not None:
            return await self._generate(self._client, prompt)

        # Built per request and closed afterwards: the UI runs each computer
        # turn in a new event loop, and the pool is bound to the loop.
        client = self._new_client()
        try:
            return await self._generate(client, prompt)
        finally:
            await client.aio.aclose()

    async def _generate(self, client: genai.Client, prompt: str) -> str | None:
        call = client.aio.models.generate_content(
            model=self._model,
            contents=prompt,
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=RESPONSE_SCHEMA,
            ),
        )
        response = await asyncio.wait_for(call, timeout=self._timeout)
        return response.text


def parse_decision(payload: Any) -> Decision:
    """Validate a decoded response body.

    Anything whose action is not exactly "roll" or "hold" becomes the
    fixed confused hold.
    """
    if not isinstance(payload, dict) or payload.get("action") not in _VALID_ACTIONS:
        logger.warning("Unexpected Gemini decision payload: %r", payload)
        return CONFUSED_DECISION

    reasoning = payload.get("reasoning")
    return Decision(
        action=payload["action"],
        reasoning=reasoning if isinstance(reasoning, str) else "",
    )
