"""Motor physics simulation and threshold classification."""

from mechamind.simulation.classifier import DEFAULT_THRESHOLDS, ClassificationThresholds, classify_motor_status
from mechamind.simulation.random_source import NumpyRandomSource, RandomSource
from mechamind.simulation.simulator import POWER_PER_RPM_KW, MotorSimulator

__all__ = [
    "DEFAULT_THRESHOLDS",
    "POWER_PER_RPM_KW",
    "ClassificationThresholds",
    "MotorSimulator",
    "NumpyRandomSource",
    "RandomSource",
    "classify_motor_status",
]
