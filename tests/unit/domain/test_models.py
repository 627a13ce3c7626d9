"""Tests for motor domain value types."""

from __future__ import annotations

import dataclasses
import json

import pytest

from mechamind.domain import MotorSample, MotorStatus, OperatingMode, SimulatorState


def _sample() -> MotorSample:
    return MotorSample(
        timestamp="14:30:05",
        temperature=47.3,
        vibration=2.61,
        rpm=1512,
        power=226.8,
        status=MotorStatus.NORMAL,
    )


def test_sample_is_immutable() -> None:
    sample = _sample()

    with pytest.raises(dataclasses.FrozenInstanceError):
        sample.temperature = 99.0  # type: ignore[misc]


def test_sample_jsonable_has_exact_wire_fields() -> None:
    payload = _sample().to_jsonable()

    assert payload == {
        "timestamp": "14:30:05",
        "temperature": 47.3,
        "vibration": 2.61,
        "rpm": 1512,
        "power": 226.8,
        "status": "Normal",
    }
    assert json.loads(json.dumps(payload)) == payload


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("normal", OperatingMode.NORMAL),
        ("Overheat", OperatingMode.OVERHEAT),
        (" UNBALANCED ", OperatingMode.UNBALANCED),
    ],
)
def test_operating_mode_parse_is_case_insensitive(text: str, expected: OperatingMode) -> None:
    assert OperatingMode.parse(text) == expected


def test_operating_mode_parse_rejects_unknown_name() -> None:
    with pytest.raises(ValueError, match="unknown operating mode"):
        OperatingMode.parse("stalled")


def test_simulator_state_initial_values() -> None:
    assert SimulatorState.initial() == SimulatorState(temperature=45.0, vibration=2.5, rpm=1500.0)


def test_simulator_state_copy_is_independent() -> None:
    state = SimulatorState.initial()
    clone = state.copy()
    clone.rpm = 10.0

    assert state.rpm == 1500.0
