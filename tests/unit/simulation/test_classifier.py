"""Unit tests for deterministic motor status classification."""

from __future__ import annotations

import pytest

from mechamind.domain.models import MotorStatus
from mechamind.simulation.classifier import ClassificationThresholds, classify_motor_status


def test_normal_readings_classify_as_normal() -> None:
    assert classify_motor_status(50.0, 3.0) == MotorStatus.NORMAL


def test_high_temperature_is_critical_regardless_of_vibration() -> None:
    assert classify_motor_status(90.0, 0.0) == MotorStatus.CRITICAL


def test_warning_vibration_escalates_to_warning() -> None:
    assert classify_motor_status(50.0, 7.0) == MotorStatus.WARNING


def test_warning_temperature_escalates_to_warning() -> None:
    assert classify_motor_status(70.0, 2.0) == MotorStatus.WARNING


def test_critical_vibration_wins_over_warning_temperature() -> None:
    assert classify_motor_status(70.0, 10.5) == MotorStatus.CRITICAL


@pytest.mark.parametrize(
    ("temperature", "vibration", "expected"),
    [
        (65.0, 2.0, MotorStatus.NORMAL),
        (65.01, 2.0, MotorStatus.WARNING),
        (80.0, 2.0, MotorStatus.WARNING),
        (80.01, 2.0, MotorStatus.CRITICAL),
        (50.0, 6.0, MotorStatus.NORMAL),
        (50.0, 6.01, MotorStatus.WARNING),
        (50.0, 10.0, MotorStatus.WARNING),
        (50.0, 10.01, MotorStatus.CRITICAL),
    ],
)
def test_thresholds_are_exclusive(temperature: float, vibration: float, expected: MotorStatus) -> None:
    assert classify_motor_status(temperature, vibration) == expected


def test_custom_thresholds_are_respected() -> None:
    thresholds = ClassificationThresholds(
        temperature_warning=40.0,
        temperature_critical=50.0,
        vibration_warning=1.0,
        vibration_critical=2.0,
    )

    assert classify_motor_status(45.0, 0.5, thresholds) == MotorStatus.WARNING
    assert classify_motor_status(45.0, 2.5, thresholds) == MotorStatus.CRITICAL


def test_thresholds_reject_inverted_temperature_limits() -> None:
    with pytest.raises(ValueError, match="temperature_warning"):
        ClassificationThresholds(temperature_warning=90.0, temperature_critical=80.0)


def test_thresholds_reject_inverted_vibration_limits() -> None:
    with pytest.raises(ValueError, match="vibration_warning"):
        ClassificationThresholds(vibration_warning=10.0, vibration_critical=10.0)


def test_status_severity_is_ordered() -> None:
    assert MotorStatus.NORMAL.severity < MotorStatus.WARNING.severity < MotorStatus.CRITICAL.severity
