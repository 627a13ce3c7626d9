"""Environment-driven runtime configuration for the motor monitor."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_API_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
API_KEY_ENV_VARS = ("GEMINI_API_KEY", "API_KEY")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class MonitorConfig:
    """Settings shared by the simulator loop, diagnosis client and CLI."""

    api_key: str | None = None
    model: str = DEFAULT_MODEL
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout_s: float = 30.0
    sample_interval_s: float = 1.0
    history_capacity: int = 30
    diagnosis_window: int = 10
    min_diagnosis_samples: int = 5
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not self.model:
            raise ValueError("model must be a non-empty string")
        if not self.api_base_url:
            raise ValueError("api_base_url must be a non-empty string")
        if self.request_timeout_s <= 0.0:
            raise ValueError("request_timeout_s must be > 0")
        if self.sample_interval_s < 0.0:
            raise ValueError("sample_interval_s must be >= 0")
        if self.history_capacity <= 0:
            raise ValueError("history_capacity must be > 0")
        if self.diagnosis_window <= 0:
            raise ValueError("diagnosis_window must be > 0")
        if self.min_diagnosis_samples <= 0:
            raise ValueError("min_diagnosis_samples must be > 0")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")

    @property
    def demo_mode(self) -> bool:
        """True when no credential is configured for the diagnosis service."""
        return not self.api_key

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> MonitorConfig:
        """Build a config from ``environ`` (defaults to ``os.environ``)."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            api_key=_first_set(env, API_KEY_ENV_VARS),
            model=_text(env, "MECHAMIND_MODEL", defaults.model),
            api_base_url=_text(env, "MECHAMIND_API_BASE_URL", defaults.api_base_url).rstrip("/"),
            request_timeout_s=_float(env, "MECHAMIND_REQUEST_TIMEOUT_S", defaults.request_timeout_s),
            sample_interval_s=_float(env, "MECHAMIND_SAMPLE_INTERVAL_S", defaults.sample_interval_s),
            history_capacity=_int(env, "MECHAMIND_HISTORY_CAPACITY", defaults.history_capacity),
            diagnosis_window=_int(env, "MECHAMIND_DIAGNOSIS_WINDOW", defaults.diagnosis_window),
            min_diagnosis_samples=_int(env, "MECHAMIND_MIN_DIAGNOSIS_SAMPLES", defaults.min_diagnosis_samples),
            log_level=_text(env, "MECHAMIND_LOG_LEVEL", defaults.log_level).upper(),
        )


def _raw(env: Mapping[str, str], name: str) -> str | None:
    value = env.get(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _first_set(env: Mapping[str, str], names: tuple[str, ...]) -> str | None:
    for name in names:
        value = _raw(env, name)
        if value is not None:
            return value
    return None


def _text(env: Mapping[str, str], name: str, default: str) -> str:
    value = _raw(env, name)
    return default if value is None else value


def _float(env: Mapping[str, str], name: str, default: float) -> float:
    value = _raw(env, name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}") from None


def _int(env: Mapping[str, str], name: str, default: int) -> int:
    value = _raw(env, name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None
