"""Request/response models for the proxy endpoint and per-action payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProxyRequest(BaseModel):
    """Envelope posted by the frontend.

    Both fields are checked by the relay, after the credential check.
    """

    action: Any = None
    data: Any = None


class ProxyResponse(BaseModel):
    """Successful relay result: the JSON document Gemini produced."""

    data: Any


class ErrorResponse(BaseModel):
    error: str


# Action payloads. Field names follow the frontend's camelCase keys.


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class GenerateFactorsData(_Payload):
    industry: str | None = None


class PairwiseData(_Payload):
    factors: list[str]
    linguistic_options: list[str] = Field(alias="linguisticOptions")


class SwotFactors(_Payload):
    s: list[str]
    w: list[str]
    o: list[str]
    t: list[str]


class GenerateStrategiesData(_Payload):
    factors: SwotFactors


class StrategyRef(_Payload):
    text: str


class EvaluateStrategiesData(_Payload):
    strategies: list[StrategyRef]
    factors: list[str]


class ExplanationData(_Payload):
    top_strategy: StrategyRef = Field(alias="topStrategy")
