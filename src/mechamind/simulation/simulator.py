"""Stateful motor physics simulator driven one step per tick."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from mechamind.domain.models import MotorSample, OperatingMode, SimulatorState
from mechamind.simulation.classifier import DEFAULT_THRESHOLDS, ClassificationThresholds, classify_motor_status
from mechamind.simulation.random_source import NumpyRandomSource, RandomSource

POWER_PER_RPM_KW = 0.15

# Normal operation: exponential smoothing toward a noisy nominal setpoint.
NORMAL_TEMPERATURE_BASE = 45.0
NORMAL_TEMPERATURE_JITTER = 5.0
NORMAL_TEMPERATURE_KEEP = 0.95
NORMAL_VIBRATION_BASE = 2.0
NORMAL_VIBRATION_JITTER = 1.5
NORMAL_VIBRATION_KEEP = 0.9
NORMAL_RPM_BASE = 1500.0
NORMAL_RPM_JITTER = 50.0
NORMAL_RPM_KEEP = 0.9

# Thermal fault: runaway heating, speed sags toward a lower band.
OVERHEAT_TEMPERATURE_MAX_RISE = 1.5
OVERHEAT_RPM_BASE = 1400.0
OVERHEAT_RPM_JITTER = 20.0
OVERHEAT_RPM_KEEP = 0.95

# Mechanical imbalance: runaway vibration plus frictional heating.
UNBALANCED_VIBRATION_MAX_RISE = 0.8
UNBALANCED_TEMPERATURE_RISE = 0.1


def _smooth(current: float, target: float, keep: float) -> float:
    return current * keep + target * (1.0 - keep)


def _time_of_day(moment: datetime) -> str:
    return moment.strftime("%X")


class MotorSimulator:
    """Advance a motor's physical state and emit classified samples.

    The state is owned by the instance (or injected by the caller) and keeps
    full precision between steps; rounding is applied only to the returned
    ``MotorSample``. Switching modes never resets the state, so transitions
    between operating modes are continuous.
    """

    def __init__(
        self,
        state: SimulatorState | None = None,
        *,
        random_source: RandomSource | None = None,
        clock: Callable[[], datetime] | None = None,
        thresholds: ClassificationThresholds = DEFAULT_THRESHOLDS,
    ) -> None:
        self._state = state if state is not None else SimulatorState.initial()
        self._random = random_source if random_source is not None else NumpyRandomSource()
        self._clock = clock if clock is not None else datetime.now
        self._thresholds = thresholds

    @property
    def state(self) -> SimulatorState:
        """Copy of the unrounded physical state."""
        return self._state.copy()

    @property
    def thresholds(self) -> ClassificationThresholds:
        return self._thresholds

    def step(self, mode: OperatingMode) -> MotorSample:
        """Apply one update under ``mode`` and return the resulting sample."""
        if mode == OperatingMode.NORMAL:
            self._step_normal()
        elif mode == OperatingMode.OVERHEAT:
            self._step_overheat()
        elif mode == OperatingMode.UNBALANCED:
            self._step_unbalanced()
        else:
            raise ValueError(f"unsupported operating mode: {mode!r}")
        return self._snapshot()

    def _step_normal(self) -> None:
        state = self._state
        state.temperature = _smooth(
            state.temperature,
            NORMAL_TEMPERATURE_BASE + self._random.uniform(0.0, NORMAL_TEMPERATURE_JITTER),
            NORMAL_TEMPERATURE_KEEP,
        )
        state.vibration = _smooth(
            state.vibration,
            NORMAL_VIBRATION_BASE + self._random.uniform(0.0, NORMAL_VIBRATION_JITTER),
            NORMAL_VIBRATION_KEEP,
        )
        state.rpm = _smooth(
            state.rpm,
            NORMAL_RPM_BASE + self._random.uniform(0.0, NORMAL_RPM_JITTER),
            NORMAL_RPM_KEEP,
        )

    def _step_overheat(self) -> None:
        state = self._state
        state.temperature += self._random.uniform(0.0, OVERHEAT_TEMPERATURE_MAX_RISE)
        state.rpm = _smooth(
            state.rpm,
            OVERHEAT_RPM_BASE + self._random.uniform(0.0, OVERHEAT_RPM_JITTER),
            OVERHEAT_RPM_KEEP,
        )

    def _step_unbalanced(self) -> None:
        state = self._state
        state.vibration += self._random.uniform(0.0, UNBALANCED_VIBRATION_MAX_RISE)
        state.temperature += UNBALANCED_TEMPERATURE_RISE

    def _snapshot(self) -> MotorSample:
        state = self._state
        return MotorSample(
            timestamp=_time_of_day(self._clock()),
            temperature=round(state.temperature, 1),
            vibration=round(state.vibration, 2),
            rpm=int(round(state.rpm)),
            power=round(state.rpm * POWER_PER_RPM_KW, 1),
            status=classify_motor_status(state.temperature, state.vibration, self._thresholds),
        )
