"""Relay a SWOT action to the Gemini generateContent API."""

import json
import logging
from typing import Any

import httpx

from config import DEFAULT_GEMINI_API_BASE, DEFAULT_GEMINI_MODEL, Settings
from swot_ai.services.prompts import PromptSpec, build_prompt
from swot_ai.utils.errors import (
    DownstreamHTTPError,
    EmptyCandidateError,
    MissingCredentialError,
    UpstreamError,
)

logger = logging.getLogger(__name__)

RESPONSE_MIME_TYPE = "application/json"
TEMPERATURE = 0.5


def build_generation_payload(spec: PromptSpec) -> dict[str, Any]:
    """Combine the prompt, its schema and the fixed generation options."""
    return {
        "contents": [{"parts": [{"text": spec.prompt_text}]}],
        "generationConfig": {
            "responseMimeType": RESPONSE_MIME_TYPE,
            "responseSchema": spec.response_schema,
            "temperature": TEMPERATURE,
        },
    }


def extract_candidate_text(result: Any) -> str:
    """Return ``candidates[0].content.parts[0].text`` or raise ``EmptyCandidateError``."""
    try:
        text = result["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        raise EmptyCandidateError() from None
    if not isinstance(text, str) or not text:
        raise EmptyCandidateError()
    return text


class ActionRelay:
    """Turns one action request into one Gemini call and returns the parsed JSON.

    The API key is given at construction and only ever placed in the outbound
    query string. ``transport`` lets callers swap the network layer, e.g. for
    an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_GEMINI_MODEL,
        api_base: str = DEFAULT_GEMINI_API_BASE,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> "ActionRelay":
        return cls(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            api_base=settings.gemini_api_base,
            timeout=settings.gemini_timeout,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.api_base}/models/{self.model}:generateContent"

    async def dispatch(self, action: Any, data: Any) -> Any:
        """Render the prompt for ``action``, call Gemini and parse its answer.

        The credential and the action are checked before anything goes over
        the network. A candidate that is not valid JSON raises ``UpstreamError``.
        """
        if not self.api_key:
            raise MissingCredentialError("GEMINI_API_KEY is not configured")

        spec = build_prompt(action, data)
        logger.info(f"Dispatching action {action} to {self.model}")

        result = await self.generate(build_generation_payload(spec))
        try:
            return json.loads(extract_candidate_text(result))
        except json.JSONDecodeError as exc:
            raise UpstreamError(str(exc)) from exc

    async def generate(self, payload: dict[str, Any]) -> Any:
        """POST ``payload`` to generateContent and return the decoded response body."""
        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
                response = await client.post(
                    self.endpoint,
                    params={"key": self.api_key},
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
        except httpx.HTTPError as exc:
            logger.error(f"Gemini API request failed: {type(exc).__name__}: {exc}")
            raise UpstreamError(str(exc)) from exc

        if not response.is_success:
            logger.error(f"Gemini API error ({response.status_code}): {response.text}")
            raise DownstreamHTTPError(response.status_code, response.text)

        try:
            return response.json()
        except ValueError as exc:
            logger.error(f"Gemini API returned a non-JSON body: {response.text}")
            raise UpstreamError(str(exc)) from exc
