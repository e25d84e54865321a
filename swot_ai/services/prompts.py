"""Prompt templates and response schemas for each SWOT action.

Every action maps to a payload model, a renderer and the JSON schema Gemini is
asked to follow. ``build_prompt`` is pure: same action and data, same prompt.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, ValidationError

from swot_ai.models.proxy import (
    EvaluateStrategiesData,
    ExplanationData,
    GenerateFactorsData,
    GenerateStrategiesData,
    PairwiseData,
)
from swot_ai.utils.errors import InvalidActionError, MalformedPayloadError

DEFAULT_INDUSTRY = "bisnis secara umum"


class Action(str, Enum):
    GENERATE_FACTORS = "generateFactors"
    GET_PAIRWISE = "getPairwise"
    GENERATE_STRATEGIES = "generateStrategies"
    EVALUATE_STRATEGIES = "evaluateStrategies"
    GET_EXPLANATION = "getExplanation"


@dataclass(frozen=True)
class PromptSpec:
    prompt_text: str
    response_schema: dict[str, Any]


def _string_array() -> dict[str, Any]:
    return {"type": "ARRAY", "items": {"type": "STRING"}}


def _object(properties: dict[str, Any]) -> dict[str, Any]:
    return {"type": "OBJECT", "properties": properties, "required": list(properties)}


FACTORS_SCHEMA = _object(
    {
        "strengths": _string_array(),
        "weaknesses": _string_array(),
        "opportunities": _string_array(),
        "threats": _string_array(),
    }
)

PAIRWISE_SCHEMA = _object(
    {
        "comparisons": {
            "type": "ARRAY",
            "items": _object(
                {
                    "factor1": {"type": "STRING"},
                    "factor2": {"type": "STRING"},
                    "dominant_factor": {"type": "STRING"},
                    "linguistic_value": {"type": "STRING"},
                }
            ),
        }
    }
)

STRATEGIES_SCHEMA = _object(
    {
        "strategies": {
            "type": "ARRAY",
            "items": _object({"type": {"type": "STRING"}, "description": {"type": "STRING"}}),
        }
    }
)

EVALUATIONS_SCHEMA = _object(
    {
        "evaluations": {
            "type": "ARRAY",
            "items": _object(
                {
                    "strategy": {"type": "STRING"},
                    "ratings": {
                        "type": "ARRAY",
                        "items": _object(
                            {
                                "factor": {"type": "STRING"},
                                "rating": {"type": "NUMBER", "minimum": 1, "maximum": 5},
                            }
                        ),
                    },
                }
            ),
        }
    }
)

EXPLANATION_SCHEMA = _object({"explanation": {"type": "STRING"}})


def render_factors(data: GenerateFactorsData) -> str:
    industry = data.industry or DEFAULT_INDUSTRY
    return (
        f'Anda adalah seorang konsultan bisnis ahli. Untuk industri "{industry}", '
        "identifikasi 3-4 faktor penting untuk masing-masing kategori SWOT "
        "(Kekuatan, Kelemahan, Peluang, Ancaman)."
    )


def render_pairwise(data: PairwiseData) -> str:
    labelled = ", ".join(f"F{i} ({factor})" for i, factor in enumerate(data.factors, start=1))
    scale = ", ".join(data.linguistic_options)
    return (
        "Anda adalah seorang analis bisnis. Lakukan perbandingan berpasangan untuk "
        f"{len(data.factors)} faktor berikut: {labelled}. Untuk setiap pasangan "
        "(misal F1 vs F2), tentukan mana yang lebih berpengaruh dan seberapa besar "
        f"pengaruhnya menggunakan skala ini: [{scale}]."
    )


def render_strategies(data: GenerateStrategiesData) -> str:
    f = data.factors
    return (
        "Anda adalah seorang ahli strategi bisnis. Diberikan faktor-faktor SWOT berikut:\n"
        f"Kekuatan: {'; '.join(f.s)}\n"
        f"Kelemahan: {'; '.join(f.w)}\n"
        f"Peluang: {'; '.join(f.o)}\n"
        f"Ancaman: {'; '.join(f.t)}\n\n"
        "Formulasikan beberapa strategi promosi yang actionable (target 2-3 strategi "
        "per jenis jika memungkinkan) untuk setiap kombinasi: SO, ST, WO, dan WT. "
        "Pastikan ada setidaknya satu dari setiap jenis."
    )


def render_evaluation(data: EvaluateStrategiesData) -> str:
    strategies = "\n".join(strategy.text for strategy in data.strategies)
    factors = "\n".join(data.factors)
    return (
        "Anda adalah seorang analis risiko dan peluang. Untuk setiap strategi berikut:\n"
        f"{strategies}\n\n"
        "Evaluasi seberapa kuat hubungan (relevansi) setiap strategi terhadap setiap "
        f"faktor SWOT berikut:\n{factors}\n\n"
        "Berikan penilaian dari 1 (sangat tidak berhubungan) hingga 5 (sangat berhubungan)."
    )


def render_explanation(data: ExplanationData) -> str:
    return (
        f'Strategi promosi berikut ini terpilih sebagai prioritas utama: "{data.top_strategy.text}". '
        "Berikan penjelasan singkat (2-3 kalimat) dalam bahasa Indonesia yang meyakinkan "
        "mengapa ini adalah langkah strategis terbaik yang harus diambil, mungkin dengan "
        "menyinggung kombinasi faktor SWOT yang paling relevan."
    )


@dataclass(frozen=True)
class _Template:
    payload: type[BaseModel]
    render: Callable[[Any], str]
    schema: dict[str, Any]


TEMPLATES: dict[Action, _Template] = {
    Action.GENERATE_FACTORS: _Template(GenerateFactorsData, render_factors, FACTORS_SCHEMA),
    Action.GET_PAIRWISE: _Template(PairwiseData, render_pairwise, PAIRWISE_SCHEMA),
    Action.GENERATE_STRATEGIES: _Template(GenerateStrategiesData, render_strategies, STRATEGIES_SCHEMA),
    Action.EVALUATE_STRATEGIES: _Template(EvaluateStrategiesData, render_evaluation, EVALUATIONS_SCHEMA),
    Action.GET_EXPLANATION: _Template(ExplanationData, render_explanation, EXPLANATION_SCHEMA),
}


def parse_action(action: Any) -> Action:
    """Resolve an action name, raising ``InvalidActionError`` for unknown names."""
    if not isinstance(action, str):
        raise InvalidActionError(action)
    try:
        return Action(action)
    except ValueError:
        raise InvalidActionError(action) from None


def build_prompt(action: Any, data: Any) -> PromptSpec:
    """Validate ``data`` for ``action`` and render its prompt and schema.

    Raises:
        InvalidActionError: ``action`` is not a known action.
        MalformedPayloadError: ``data`` is missing fields the template needs.
    """
    template = TEMPLATES[parse_action(action)]
    try:
        payload = template.payload.model_validate({} if data is None else data)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'data'}: {err['msg']}" for err in exc.errors()
        )
        raise MalformedPayloadError(f"malformed payload for {action}: {problems}") from exc
    return PromptSpec(prompt_text=template.render(payload), response_schema=template.schema)
