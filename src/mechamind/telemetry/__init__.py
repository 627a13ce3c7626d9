"""Sample history and the periodic sampling driver."""

from mechamind.telemetry.driver import DEFAULT_SAMPLE_INTERVAL_S, DriverState, DriverStateError, SamplingDriver
from mechamind.telemetry.history import DEFAULT_HISTORY_CAPACITY, HistoryBuffer

__all__ = [
    "DEFAULT_HISTORY_CAPACITY",
    "DEFAULT_SAMPLE_INTERVAL_S",
    "DriverState",
    "DriverStateError",
    "HistoryBuffer",
    "SamplingDriver",
]
