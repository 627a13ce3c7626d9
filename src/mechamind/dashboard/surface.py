"""Read-only view models and commands backing a monitoring dashboard."""

from __future__ import annotations

from dataclasses import dataclass

from mechamind.diagnosis.contracts import AnalysisResult
from mechamind.diagnosis.coordinator import DiagnosisCoordinator
from mechamind.domain.models import MotorSample, OperatingMode
from mechamind.simulation.classifier import DEFAULT_THRESHOLDS, ClassificationThresholds
from mechamind.telemetry.driver import DriverState, SamplingDriver


@dataclass(frozen=True, slots=True)
class KpiReadout:
    """One headline value card."""

    title: str
    value: float
    unit: str
    alert: bool = False


@dataclass(frozen=True, slots=True)
class ChartLimits:
    """Critical reference lines drawn on the history charts."""

    temperature_critical: float
    vibration_critical: float


class MonitorDashboard:
    """Consumer surface over the driver, its history and the diagnosis coordinator."""

    def __init__(
        self,
        driver: SamplingDriver,
        coordinator: DiagnosisCoordinator,
        *,
        thresholds: ClassificationThresholds = DEFAULT_THRESHOLDS,
    ) -> None:
        self._driver = driver
        self._coordinator = coordinator
        self._thresholds = thresholds

    @property
    def latest(self) -> MotorSample | None:
        return self._driver.history.latest

    @property
    def history(self) -> tuple[MotorSample, ...]:
        return self._driver.history.samples()

    @property
    def buffer_length(self) -> int:
        return len(self._driver.history)

    @property
    def buffer_capacity(self) -> int:
        return self._driver.history.capacity

    @property
    def buffer_indicator(self) -> str:
        """Fill level formatted as ``N/capacity``."""
        return f"{self.buffer_length}/{self.buffer_capacity}"

    @property
    def mode(self) -> OperatingMode:
        return self._driver.mode

    @property
    def is_paused(self) -> bool:
        return self._driver.state == DriverState.PAUSED

    @property
    def is_analyzing(self) -> bool:
        return self._coordinator.busy

    @property
    def analysis(self) -> AnalysisResult | None:
        return self._coordinator.latest_result

    def kpis(self) -> tuple[KpiReadout, ...]:
        """Headline readouts for the latest sample (zeros before the first tick)."""
        sample = self.latest
        if sample is None:
            return (
                KpiReadout(title="Temperature", value=0.0, unit="°C"),
                KpiReadout(title="Vibration", value=0.0, unit="mm/s"),
                KpiReadout(title="Speed", value=0.0, unit="RPM"),
                KpiReadout(title="Power", value=0.0, unit="kW"),
            )
        return (
            KpiReadout(
                title="Temperature",
                value=sample.temperature,
                unit="°C",
                alert=sample.temperature > self._thresholds.temperature_warning,
            ),
            KpiReadout(
                title="Vibration",
                value=sample.vibration,
                unit="mm/s",
                alert=sample.vibration > self._thresholds.vibration_warning,
            ),
            KpiReadout(title="Speed", value=float(sample.rpm), unit="RPM"),
            KpiReadout(title="Power", value=sample.power, unit="kW"),
        )

    def chart_limits(self) -> ChartLimits:
        return ChartLimits(
            temperature_critical=self._thresholds.temperature_critical,
            vibration_critical=self._thresholds.vibration_critical,
        )

    def select_mode(self, mode: OperatingMode) -> None:
        self._driver.set_mode(mode)

    def toggle_pause(self) -> DriverState:
        return self._driver.toggle_pause()

    async def request_diagnosis(self) -> AnalysisResult | None:
        return await self._coordinator.request()
