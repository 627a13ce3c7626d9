"""Periodic sampling driver feeding simulator output into history."""

from __future__ import annotations

import asyncio
import logging
from enum import StrEnum
from typing import Callable

from mechamind.domain.models import MotorSample, OperatingMode
from mechamind.simulation.simulator import MotorSimulator
from mechamind.telemetry.history import HistoryBuffer

log = logging.getLogger("mechamind.telemetry.driver")

DEFAULT_SAMPLE_INTERVAL_S = 1.0


class DriverState(StrEnum):
    """Lifecycle of the sampling driver."""

    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"


class DriverStateError(RuntimeError):
    """Raised for a lifecycle transition that is not allowed from the current state."""


class SamplingDriver:
    """Serialize simulator steps at a fixed cadence.

    ``tick()`` performs at most one step and is the only place the simulator
    is advanced, so steps never overlap. ``run()`` wraps it in a cooperative
    asyncio loop. Pausing suspends future steps but keeps the history.
    """

    def __init__(
        self,
        simulator: MotorSimulator,
        history: HistoryBuffer,
        *,
        interval_s: float = DEFAULT_SAMPLE_INTERVAL_S,
        mode: OperatingMode = OperatingMode.NORMAL,
    ) -> None:
        if interval_s < 0.0:
            raise ValueError("interval_s must be >= 0")
        self._simulator = simulator
        self._history = history
        self._interval_s = interval_s
        self._mode = mode
        self._state = DriverState.STOPPED
        self._ticks = 0
        # cleared only while paused
        self._unpaused = asyncio.Event()
        self._unpaused.set()

    @property
    def state(self) -> DriverState:
        return self._state

    @property
    def mode(self) -> OperatingMode:
        return self._mode

    @property
    def interval_s(self) -> float:
        return self._interval_s

    @property
    def tick_count(self) -> int:
        """Number of samples produced since construction."""
        return self._ticks

    @property
    def history(self) -> HistoryBuffer:
        return self._history

    def set_mode(self, mode: OperatingMode) -> None:
        """Select the update rule used from the next tick onward."""
        if mode != self._mode:
            log.info("Operating mode %s -> %s", self._mode.value, mode.value)
        self._mode = mode

    def start(self) -> None:
        self._transition(DriverState.RUNNING, allowed_from=(DriverState.STOPPED,))

    def pause(self) -> None:
        self._transition(DriverState.PAUSED, allowed_from=(DriverState.RUNNING,))

    def resume(self) -> None:
        self._transition(DriverState.RUNNING, allowed_from=(DriverState.PAUSED,))

    def stop(self) -> None:
        self._transition(DriverState.STOPPED, allowed_from=tuple(DriverState))

    def toggle_pause(self) -> DriverState:
        """Flip between running and paused; returns the new state."""
        if self._state == DriverState.RUNNING:
            self.pause()
        elif self._state == DriverState.PAUSED:
            self.resume()
        else:
            raise DriverStateError("cannot toggle pause while the driver is stopped")
        return self._state

    def tick(self) -> MotorSample | None:
        """Advance the simulator once if running and record the sample."""
        if self._state != DriverState.RUNNING:
            return None
        sample = self._simulator.step(self._mode)
        self._history.append(sample)
        self._ticks += 1
        log.debug(
            "tick %d mode=%s temperature=%.1f vibration=%.2f rpm=%d status=%s",
            self._ticks,
            self._mode.value,
            sample.temperature,
            sample.vibration,
            sample.rpm,
            sample.status.value,
        )
        return sample

    async def run(
        self,
        *,
        max_ticks: int | None = None,
        on_sample: Callable[[MotorSample], None] | None = None,
    ) -> int:
        """Tick every ``interval_s`` seconds until stopped or ``max_ticks`` samples.

        Starts the driver if it is stopped. Returns the number of samples
        produced by this call.
        """
        if max_ticks is not None and max_ticks <= 0:
            raise ValueError("max_ticks must be > 0")
        if self._state == DriverState.STOPPED:
            self.start()

        produced = 0
        while max_ticks is None or produced < max_ticks:
            if self._state == DriverState.PAUSED:
                await self._unpaused.wait()
                continue
            await asyncio.sleep(self._interval_s)
            if self._state == DriverState.STOPPED:
                break
            sample = self.tick()
            if sample is None:
                continue
            produced += 1
            if on_sample is not None:
                on_sample(sample)
        return produced

    def _transition(self, target: DriverState, *, allowed_from: tuple[DriverState, ...]) -> None:
        if self._state not in allowed_from:
            raise DriverStateError(f"cannot move driver from {self._state.value} to {target.value}")
        if self._state != target:
            log.info("Sampling driver %s -> %s", self._state.value, target.value)
        self._state = target
        if target == DriverState.PAUSED:
            self._unpaused.clear()
        else:
            self._unpaused.set()
