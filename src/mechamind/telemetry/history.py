"""Bounded, append-only history of generated motor samples."""

from __future__ import annotations

from collections import deque
from typing import Iterator

from mechamind.domain.models import MotorSample

DEFAULT_HISTORY_CAPACITY = 30


class HistoryBuffer:
    """FIFO buffer that keeps the most recent samples in generation order."""

    def __init__(self, capacity: int = DEFAULT_HISTORY_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be > 0")
        self._capacity = capacity
        self._samples: deque[MotorSample] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return len(self._samples) == self._capacity

    @property
    def latest(self) -> MotorSample | None:
        """Most recently appended sample, if any."""
        if not self._samples:
            return None
        return self._samples[-1]

    def append(self, sample: MotorSample) -> tuple[MotorSample, ...]:
        """Append ``sample``, evicting the oldest entries past capacity."""
        self._samples.append(sample)
        return self.samples()

    def samples(self) -> tuple[MotorSample, ...]:
        return tuple(self._samples)

    def tail(self, count: int) -> tuple[MotorSample, ...]:
        """Return the last ``count`` samples, oldest first."""
        if count < 0:
            raise ValueError("count must be >= 0")
        if count == 0:
            return ()
        return tuple(self._samples)[-count:]

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[MotorSample]:
        return iter(self.samples())
