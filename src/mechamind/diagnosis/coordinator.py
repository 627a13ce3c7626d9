"""Single-flight coordination of diagnosis requests."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol, Sequence

from mechamind.diagnosis.contracts import AnalysisResult
from mechamind.diagnosis.prompt import DIAGNOSIS_WINDOW
from mechamind.domain.models import MotorSample
from mechamind.telemetry.history import HistoryBuffer

log = logging.getLogger("mechamind.diagnosis.coordinator")

MIN_DIAGNOSIS_SAMPLES = 5


class DiagnosisService(Protocol):
    """Anything that turns a window of samples into an assessment."""

    async def analyze(self, samples: Sequence[MotorSample]) -> AnalysisResult: ...


class DiagnosisCoordinator:
    """Keep at most one diagnosis request outstanding.

    A request made while another is pending joins the pending one and gets
    the same result. Sampling is unaffected: the window is copied from the
    history when the request starts.
    """

    def __init__(
        self,
        service: DiagnosisService,
        history: HistoryBuffer,
        *,
        window: int = DIAGNOSIS_WINDOW,
        min_samples: int = MIN_DIAGNOSIS_SAMPLES,
    ) -> None:
        if window <= 0:
            raise ValueError("window must be > 0")
        if min_samples <= 0:
            raise ValueError("min_samples must be > 0")
        self._service = service
        self._history = history
        self._window = window
        self._min_samples = min_samples
        self._pending: asyncio.Future[AnalysisResult] | None = None
        self._latest: AnalysisResult | None = None

    @property
    def busy(self) -> bool:
        return self._pending is not None and not self._pending.done()

    @property
    def latest_result(self) -> AnalysisResult | None:
        return self._latest

    @property
    def min_samples(self) -> int:
        return self._min_samples

    async def request(self) -> AnalysisResult | None:
        """Run (or join) a diagnosis of the latest window.

        Returns ``None`` when the history holds fewer than ``min_samples`` or
        when the request is withdrawn through ``cancel()``. A completed result
        is recorded even if the caller that started it has gone away.
        """
        pending = self._pending
        if pending is not None and not pending.done():
            log.info("Diagnosis already in flight, joining pending request")
            return await _await_unless_withdrawn(pending)

        if len(self._history) < self._min_samples:
            log.info(
                "Diagnosis skipped: %d samples buffered, %d required",
                len(self._history),
                self._min_samples,
            )
            return None

        window = self._history.tail(self._window)
        log.info("Requesting diagnosis for %d samples", len(window))
        task = asyncio.ensure_future(self._service.analyze(window))
        task.add_done_callback(self._settle)
        self._pending = task
        return await _await_unless_withdrawn(task)

    def cancel(self) -> bool:
        """Cancel the in-flight request; returns whether one was cancelled."""
        pending = self._pending
        if pending is None or pending.done():
            return False
        pending.cancel()
        self._pending = None
        log.info("Diagnosis request cancelled")
        return True

    def _settle(self, task: asyncio.Future[AnalysisResult]) -> None:
        if self._pending is task:
            self._pending = None
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            log.warning("Diagnosis request failed: %s", error)
            return
        self._latest = task.result()


async def _await_unless_withdrawn(task: asyncio.Future[AnalysisResult]) -> AnalysisResult | None:
    # shield keeps a cancelled caller from cancelling the shared request.
    try:
        return await asyncio.shield(task)
    except asyncio.CancelledError:
        current = asyncio.current_task()
        if task.cancelled() and (current is None or current.cancelling() == 0):
            return None
        raise
