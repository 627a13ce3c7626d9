"""Result contract exchanged with the remote diagnosis service."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class DiagnosisStatus(StrEnum):
    """Qualitative health assessment returned by the diagnosis service."""

    HEALTHY = "Healthy"
    AT_RISK = "At Risk"
    CRITICAL_FAILURE = "Critical Failure"


class AnalysisPayloadError(ValueError):
    """Raised when a service response does not match the analysis schema."""


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Well-formed assessment; every diagnosis path ends in one of these."""

    status: DiagnosisStatus
    explanation: str
    recommendation: str

    def to_jsonable(self) -> dict[str, str]:
        return {
            "status": self.status.value,
            "explanation": self.explanation,
            "recommendation": self.recommendation,
        }


DEMO_MODE_RESULT = AnalysisResult(
    status=DiagnosisStatus.HEALTHY,
    explanation="API key not configured. Demo mode.",
    recommendation="Configure an API key to receive a real analysis.",
)

SERVICE_FAILURE_RESULT = AnalysisResult(
    status=DiagnosisStatus.AT_RISK,
    explanation="Connection error with the AI service.",
    recommendation="Check your connection and API key.",
)

ANALYSIS_FIELDS = ("status", "explanation", "recommendation")


def parse_analysis_payload(text: str) -> AnalysisResult:
    """Validate a JSON document against the analysis schema."""
    if not text or not text.strip():
        raise AnalysisPayloadError("empty analysis payload")
    try:
        payload: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise AnalysisPayloadError(f"analysis payload is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise AnalysisPayloadError("analysis payload must be a JSON object")

    missing = [name for name in ANALYSIS_FIELDS if name not in payload]
    if missing:
        raise AnalysisPayloadError(f"analysis payload missing fields: {', '.join(missing)}")
    unexpected = sorted(set(payload) - set(ANALYSIS_FIELDS))
    if unexpected:
        raise AnalysisPayloadError(f"analysis payload has unexpected fields: {', '.join(unexpected)}")
    for name in ANALYSIS_FIELDS:
        if not isinstance(payload[name], str):
            raise AnalysisPayloadError(f"analysis field {name} must be a string")

    try:
        status = DiagnosisStatus(payload["status"])
    except ValueError:
        raise AnalysisPayloadError(f"unknown analysis status: {payload['status']!r}") from None

    return AnalysisResult(
        status=status,
        explanation=payload["explanation"],
        recommendation=payload["recommendation"],
    )
