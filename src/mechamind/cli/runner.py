"""CLI runner that drives the motor monitor and prints telemetry as JSON lines."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from dataclasses import dataclass, replace
from typing import Any, Sequence

import httpx

from mechamind.config import LOG_LEVELS, MonitorConfig
from mechamind.dashboard import MonitorDashboard
from mechamind.diagnosis import AnalysisResult, DiagnosisCoordinator, GeminiDiagnosisClient
from mechamind.domain import MotorSample, OperatingMode
from mechamind.logging_config import setup_logging
from mechamind.simulation import MotorSimulator, NumpyRandomSource
from mechamind.telemetry import HistoryBuffer, SamplingDriver


@dataclass(frozen=True, slots=True)
class MonitorRunSummary:
    """Outcome of one CLI monitoring run."""

    samples: tuple[MotorSample, ...]
    analysis: AnalysisResult | None
    buffer_indicator: str


def build_parser() -> argparse.ArgumentParser:
    """Create CLI parser for a monitoring run."""
    parser = argparse.ArgumentParser(
        prog="mechamind-monitor",
        description="Simulate motor telemetry and optionally request an AI health assessment.",
    )
    parser.add_argument(
        "--mode",
        type=_operating_mode,
        default=OperatingMode.NORMAL,
        help="Operating mode: normal, overheat or unbalanced.",
    )
    parser.add_argument("--ticks", type=_positive_int, default=30, help="Number of samples to generate.")
    parser.add_argument(
        "--interval",
        type=float,
        default=None,
        help="Seconds between samples (default from MECHAMIND_SAMPLE_INTERVAL_S; 0 runs immediately).",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the simulator random source.")
    parser.add_argument(
        "--diagnose",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Request a diagnosis of the most recent samples after sampling.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=None,
        help="Logging level (default from MECHAMIND_LOG_LEVEL).",
    )
    return parser


def resolve_config(args: argparse.Namespace, base: MonitorConfig | None = None) -> MonitorConfig:
    """Apply command line overrides on top of the environment config."""
    config = base if base is not None else MonitorConfig.from_env()
    overrides: dict[str, Any] = {}
    if args.interval is not None:
        overrides["sample_interval_s"] = args.interval
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return replace(config, **overrides) if overrides else config


async def run_monitor(
    args: argparse.Namespace,
    config: MonitorConfig,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> MonitorRunSummary:
    """Sample ``args.ticks`` times, print each sample and optionally diagnose."""
    simulator = MotorSimulator(random_source=NumpyRandomSource.seeded(args.seed))
    history = HistoryBuffer(capacity=config.history_capacity)
    driver = SamplingDriver(simulator, history, interval_s=config.sample_interval_s, mode=args.mode)

    produced: list[MotorSample] = []

    def emit(sample: MotorSample) -> None:
        produced.append(sample)
        print(json.dumps(sample.to_jsonable(), sort_keys=True))

    async with GeminiDiagnosisClient(config, http_client=http_client) as client:
        coordinator = DiagnosisCoordinator(
            client,
            history,
            window=config.diagnosis_window,
            min_samples=config.min_diagnosis_samples,
        )
        dashboard = MonitorDashboard(driver, coordinator, thresholds=simulator.thresholds)

        await driver.run(max_ticks=args.ticks, on_sample=emit)
        driver.stop()

        analysis = None
        if args.diagnose:
            analysis = await dashboard.request_diagnosis()
            if analysis is None:
                print(
                    f"[WARN] Diagnosis needs at least {coordinator.min_samples} samples.",
                    file=sys.stderr,
                )
            else:
                print(json.dumps({"analysis": analysis.to_jsonable()}, sort_keys=True))

    print(f"buffer: {dashboard.buffer_indicator}")
    return MonitorRunSummary(
        samples=tuple(produced),
        analysis=analysis,
        buffer_indicator=dashboard.buffer_indicator,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = resolve_config(args)
        setup_logging(config.log_level)
        asyncio.run(run_monitor(args, config))
    except Exception as exc:
        print(f"[ERROR] Monitor run failed: {exc}", file=sys.stderr)
        return 2
    return 0


def _operating_mode(value: str) -> OperatingMode:
    try:
        return OperatingMode.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if parsed <= 0:
        raise argparse.ArgumentTypeError("must be > 0")
    return parsed


if __name__ == "__main__":
    raise SystemExit(main())
