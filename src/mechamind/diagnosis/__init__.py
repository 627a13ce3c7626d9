"""Remote motor diagnosis: contract, prompt, client and request coordination."""

from mechamind.diagnosis.client import GeminiDiagnosisClient
from mechamind.diagnosis.contracts import (
    DEMO_MODE_RESULT,
    SERVICE_FAILURE_RESULT,
    AnalysisPayloadError,
    AnalysisResult,
    DiagnosisStatus,
    parse_analysis_payload,
)
from mechamind.diagnosis.coordinator import DiagnosisCoordinator, DiagnosisService
from mechamind.diagnosis.prompt import DIAGNOSIS_WINDOW, analysis_response_schema, build_diagnosis_prompt

__all__ = [
    "DEMO_MODE_RESULT",
    "DIAGNOSIS_WINDOW",
    "SERVICE_FAILURE_RESULT",
    "AnalysisPayloadError",
    "AnalysisResult",
    "DiagnosisCoordinator",
    "DiagnosisService",
    "DiagnosisStatus",
    "GeminiDiagnosisClient",
    "analysis_response_schema",
    "build_diagnosis_prompt",
    "parse_analysis_payload",
]
