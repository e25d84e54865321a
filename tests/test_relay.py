"""
Tests for the relay helpers and configuration wiring.
"""

import asyncio

import httpx
import pytest

from config import DEFAULT_GEMINI_MODEL, Settings
from conftest import gemini_body
from swot_ai.routers.proxy import get_relay
from swot_ai.services.prompts import PromptSpec
from swot_ai.services.relay import ActionRelay, build_generation_payload, extract_candidate_text
from swot_ai.utils.errors import DownstreamHTTPError, EmptyCandidateError, MissingCredentialError, UpstreamError


def test_generation_payload():
    schema = {"type": "OBJECT", "properties": {"explanation": {"type": "STRING"}}, "required": ["explanation"]}

    payload = build_generation_payload(PromptSpec(prompt_text="Hello", response_schema=schema))

    assert payload == {
        "contents": [{"parts": [{"text": "Hello"}]}],
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": schema,
            "temperature": 0.5,
        },
    }


class TestExtractCandidateText:
    def test_first_candidate(self):
        assert extract_candidate_text(gemini_body('{"a": 1}')) == '{"a": 1}'

    @pytest.mark.parametrize(
        "result",
        [None, [], {"candidates": None}, {"candidates": [{"content": {"parts": [{"text": 42}]}}]}],
    )
    def test_invalid_shapes(self, result):
        with pytest.raises(EmptyCandidateError):
            extract_candidate_text(result)


class TestActionRelay:
    def test_endpoint(self):
        relay = ActionRelay(api_key="k", model="gemini-test", api_base="https://example.test/v1beta/")

        assert relay.endpoint == "https://example.test/v1beta/models/gemini-test:generateContent"

    def test_from_settings(self, monkeypatch):
        monkeypatch.delenv("GEMINI_MODEL", raising=False)
        settings = Settings(_env_file=None, gemini_api_key="secret", gemini_timeout=30)

        relay = ActionRelay.from_settings(settings)

        assert relay.api_key == "secret"
        assert relay.model == DEFAULT_GEMINI_MODEL
        assert relay.timeout == 30

    def test_get_relay_uses_injected_settings(self):
        relay = get_relay(Settings(_env_file=None, gemini_api_key="injected", gemini_model="m"))

        assert relay.api_key == "injected"
        assert relay.model == "m"

    def test_dispatch_without_key(self):
        relay = ActionRelay(api_key="")

        with pytest.raises(MissingCredentialError):
            asyncio.run(relay.dispatch("getExplanation", {"topStrategy": {"text": "x"}}))

    def test_generate_raises_on_error_status(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(400, text="bad schema"))
        relay = ActionRelay(api_key="k", transport=transport)

        with pytest.raises(DownstreamHTTPError) as exc_info:
            asyncio.run(relay.generate({"contents": []}))

        assert exc_info.value.status == 400
        assert exc_info.value.body == "bad schema"
        assert "400" in exc_info.value.message

    def test_dispatch_wraps_bad_candidate(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=gemini_body("not json")))
        relay = ActionRelay(api_key="k", transport=transport)

        with pytest.raises(UpstreamError) as exc_info:
            asyncio.run(relay.dispatch("getExplanation", {"topStrategy": {"text": "x"}}))

        assert exc_info.value.status_code == 500
        assert exc_info.value.message.startswith("Expecting value")


class TestSettings:
    def test_key_from_environment(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "from-env")
        monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.test, https://b.test")

        settings = Settings(_env_file=None)

        assert settings.gemini_api_key == "from-env"
        assert settings.allowed_origins_list == ["https://a.test", "https://b.test"]

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("GEMINI_TIMEOUT", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        settings = Settings(_env_file=None)

        assert settings.gemini_api_key == ""
        assert settings.gemini_timeout is None
        assert not settings.is_production
