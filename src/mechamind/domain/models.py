"""Core domain models for MechaMind motor condition monitoring."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

NOMINAL_TEMPERATURE_C = 45.0
NOMINAL_VIBRATION_MM_S = 2.5
NOMINAL_RPM = 1500.0


class MotorStatus(StrEnum):
    """Threshold-derived health label attached to every sample."""

    NORMAL = "Normal"
    WARNING = "Warning"
    CRITICAL = "Critical"

    @property
    def severity(self) -> int:
        """Ordinal severity, higher is worse."""
        return _STATUS_SEVERITY[self]


_STATUS_SEVERITY = {
    MotorStatus.NORMAL: 0,
    MotorStatus.WARNING: 1,
    MotorStatus.CRITICAL: 2,
}


class OperatingMode(StrEnum):
    """Physical update rule applied by the simulator on the next step."""

    NORMAL = "NORMAL"
    OVERHEAT = "OVERHEAT"
    UNBALANCED = "UNBALANCED"

    @classmethod
    def parse(cls, text: str) -> OperatingMode:
        """Resolve a case-insensitive mode name."""
        normalized = text.strip().upper()
        try:
            return cls(normalized)
        except ValueError:
            allowed = ", ".join(mode.value.lower() for mode in cls)
            raise ValueError(f"unknown operating mode {text!r}; expected one of: {allowed}") from None


@dataclass(frozen=True, slots=True)
class MotorSample:
    """Display-rounded telemetry snapshot produced by one simulator step."""

    timestamp: str
    temperature: float
    vibration: float
    rpm: int
    power: float
    status: MotorStatus

    def to_jsonable(self) -> dict[str, Any]:
        """Return a JSON-serializable mapping with the sample fields."""
        return {
            "timestamp": self.timestamp,
            "temperature": self.temperature,
            "vibration": self.vibration,
            "rpm": self.rpm,
            "power": self.power,
            "status": self.status.value,
        }


@dataclass(slots=True)
class SimulatorState:
    """Unrounded physical state carried between simulator steps."""

    temperature: float
    vibration: float
    rpm: float

    @classmethod
    def initial(cls) -> SimulatorState:
        return cls(
            temperature=NOMINAL_TEMPERATURE_C,
            vibration=NOMINAL_VIBRATION_MM_S,
            rpm=NOMINAL_RPM,
        )

    def copy(self) -> SimulatorState:
        return SimulatorState(temperature=self.temperature, vibration=self.vibration, rpm=self.rpm)
