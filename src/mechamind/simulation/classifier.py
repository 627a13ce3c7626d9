"""Deterministic threshold classification of motor telemetry."""

from __future__ import annotations

from dataclasses import dataclass

from mechamind.domain.models import MotorStatus


@dataclass(frozen=True, slots=True)
class ClassificationThresholds:
    """Warning and critical limits for temperature (C) and vibration (mm/s)."""

    temperature_warning: float = 65.0
    temperature_critical: float = 80.0
    vibration_warning: float = 6.0
    vibration_critical: float = 10.0

    def __post_init__(self) -> None:
        if self.temperature_warning >= self.temperature_critical:
            raise ValueError("temperature_warning must be below temperature_critical")
        if self.vibration_warning >= self.vibration_critical:
            raise ValueError("vibration_warning must be below vibration_critical")
        if self.vibration_warning < 0.0:
            raise ValueError("vibration_warning must be >= 0")


DEFAULT_THRESHOLDS = ClassificationThresholds()


def classify_motor_status(
    temperature: float,
    vibration: float,
    thresholds: ClassificationThresholds = DEFAULT_THRESHOLDS,
) -> MotorStatus:
    """Map one temperature/vibration pair onto a status label.

    Limits are exclusive: a reading equal to a threshold does not escalate.
    The critical check runs first so it always wins over warning.
    """
    if temperature > thresholds.temperature_critical or vibration > thresholds.vibration_critical:
        return MotorStatus.CRITICAL
    if temperature > thresholds.temperature_warning or vibration > thresholds.vibration_warning:
        return MotorStatus.WARNING
    return MotorStatus.NORMAL
