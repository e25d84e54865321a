"""Pydantic models for request/response validation.

This module contains data models used for:
- the proxy request envelope and its responses
- per-action payload validation before prompt rendering
"""

from swot_ai.models.proxy import (
    ErrorResponse,
    EvaluateStrategiesData,
    ExplanationData,
    GenerateFactorsData,
    GenerateStrategiesData,
    PairwiseData,
    ProxyRequest,
    ProxyResponse,
    StrategyRef,
    SwotFactors,
)

__all__ = [
    "ErrorResponse",
    "EvaluateStrategiesData",
    "ExplanationData",
    "GenerateFactorsData",
    "GenerateStrategiesData",
    "PairwiseData",
    "ProxyRequest",
    "ProxyResponse",
    "StrategyRef",
    "SwotFactors",
]
