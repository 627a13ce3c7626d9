"""Domain models for simulated motor telemetry."""

from mechamind.domain.models import MotorSample, MotorStatus, OperatingMode, SimulatorState

__all__ = [
    "MotorSample",
    "MotorStatus",
    "OperatingMode",
    "SimulatorState",
]
