"""Gemini-backed remote diagnosis client.

Sends a window of recent motor samples to the ``generateContent`` endpoint
with a structured-output schema and maps the reply onto ``AnalysisResult``.
Every failure is normalized into the "At Risk" fallback result so callers
never have to handle a separate error path.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

import httpx

from mechamind.config import MonitorConfig
from mechamind.diagnosis.contracts import (
    DEMO_MODE_RESULT,
    SERVICE_FAILURE_RESULT,
    AnalysisPayloadError,
    AnalysisResult,
    parse_analysis_payload,
)
from mechamind.diagnosis.prompt import analysis_response_schema, build_diagnosis_prompt
from mechamind.domain.models import MotorSample
from mechamind.simulation.classifier import DEFAULT_THRESHOLDS, ClassificationThresholds

log = logging.getLogger("mechamind.diagnosis.client")


class GeminiDiagnosisClient:
    """Async client for motor health assessments."""

    def __init__(
        self,
        config: MonitorConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
        thresholds: ClassificationThresholds = DEFAULT_THRESHOLDS,
    ) -> None:
        self._config = config
        self._thresholds = thresholds
        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else httpx.AsyncClient(
            timeout=config.request_timeout_s
        )

    @property
    def endpoint(self) -> str:
        return f"{self._config.api_base_url}/models/{self._config.model}:generateContent"

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> GeminiDiagnosisClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def analyze(self, samples: Sequence[MotorSample]) -> AnalysisResult:
        """Return an assessment for the most recent samples; never raises on failure."""
        if self._config.demo_mode:
            log.info("No API key configured, returning demo-mode assessment")
            return DEMO_MODE_RESULT

        window = list(samples)[-self._config.diagnosis_window:]
        payload = {
            "contents": [
                {
                    "role": "user",
                    "parts": [
                        {
                            "text": build_diagnosis_prompt(
                                window,
                                thresholds=self._thresholds,
                                window=self._config.diagnosis_window,
                            )
                        }
                    ],
                }
            ],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": analysis_response_schema(),
            },
        }

        try:
            response = await self._client.post(
                self.endpoint,
                json=payload,
                headers={"x-goog-api-key": self._config.api_key or ""},
            )
            response.raise_for_status()
            result = parse_analysis_payload(_extract_text(response.json()))
        except Exception as exc:
            log.warning("Diagnosis request failed: %s", exc)
            return SERVICE_FAILURE_RESULT

        log.info("Diagnosis completed with status %s for %d samples", result.status.value, len(window))
        return result


def _extract_text(data: Any) -> str:
    """Concatenate the text parts of the first candidate."""
    if not isinstance(data, dict):
        raise AnalysisPayloadError("service response must be a JSON object")
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        raise AnalysisPayloadError("no response from AI")
    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        raise AnalysisPayloadError("no response from AI")
    text = "".join(part.get("text", "") for part in parts if isinstance(part, dict))
    if not text:
        raise AnalysisPayloadError("no response from AI")
    return text
