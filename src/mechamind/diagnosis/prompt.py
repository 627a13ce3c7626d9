"""Prompt and response schema for the predictive-maintenance assessment."""

from __future__ import annotations

import json
from typing import Any, Sequence

from mechamind.diagnosis.contracts import DiagnosisStatus
from mechamind.domain.models import MotorSample
from mechamind.simulation.classifier import DEFAULT_THRESHOLDS, ClassificationThresholds

DIAGNOSIS_WINDOW = 10


def build_diagnosis_prompt(
    samples: Sequence[MotorSample],
    *,
    thresholds: ClassificationThresholds = DEFAULT_THRESHOLDS,
    window: int = DIAGNOSIS_WINDOW,
) -> str:
    """Render the most recent ``window`` samples into the analysis prompt."""
    recent = list(samples)[-window:] if window > 0 else []
    data_context = json.dumps([sample.to_jsonable() for sample in recent])
    return (
        "Act as an expert engineer in predictive maintenance and mechatronics.\n"
        "Analyze the following telemetry from an industrial motor (last few seconds).\n"
        "\n"
        f"Data: {data_context}\n"
        "\n"
        "Reference thresholds:\n"
        f"- Temperature > {thresholds.temperature_warning:g} C is an alert, "
        f"> {thresholds.temperature_critical:g} C is critical.\n"
        f"- Vibration > {thresholds.vibration_warning:g} mm/s is an alert, "
        f"> {thresholds.vibration_critical:g} mm/s is critical (possible imbalance).\n"
        "\n"
        "Respond strictly in JSON."
    )


def analysis_response_schema() -> dict[str, Any]:
    """Structured-output schema requested from the model."""
    return {
        "type": "OBJECT",
        "properties": {
            "status": {"type": "STRING", "enum": [status.value for status in DiagnosisStatus]},
            "explanation": {"type": "STRING"},
            "recommendation": {"type": "STRING"},
        },
        "required": ["status", "explanation", "recommendation"],
    }
