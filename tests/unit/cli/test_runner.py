"""Tests for the monitor CLI runner output and exit behavior."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Iterator

import httpx
import pytest

from mechamind.cli import runner
from mechamind.config import MonitorConfig
from mechamind.diagnosis import DiagnosisStatus
from mechamind.domain import OperatingMode


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("GEMINI_API_KEY", "API_KEY", "MECHAMIND_SAMPLE_INTERVAL_S", "MECHAMIND_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield
    logging.getLogger("mechamind").handlers.clear()


def _json_lines(text: str) -> list[dict[str, object]]:
    return [json.loads(line) for line in text.splitlines() if line.startswith("{")]


def test_main_prints_one_json_line_per_sample(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = runner.main(["--ticks", "6", "--interval", "0", "--seed", "3"])

    out = capsys.readouterr().out
    records = _json_lines(out)
    assert exit_code == 0
    assert len(records) == 6
    assert set(records[0]) == {"timestamp", "temperature", "vibration", "rpm", "power", "status"}
    assert out.strip().splitlines()[-1] == "buffer: 6/30"


def test_main_reports_demo_diagnosis_without_credentials(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = runner.main(["--ticks", "5", "--interval", "0", "--diagnose"])

    records = _json_lines(capsys.readouterr().out)
    assert exit_code == 0
    assert records[-1]["analysis"] == {
        "status": "Healthy",
        "explanation": "API key not configured. Demo mode.",
        "recommendation": "Configure an API key to receive a real analysis.",
    }


def test_main_warns_when_too_few_samples_for_diagnosis(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = runner.main(["--ticks", "2", "--interval", "0", "--diagnose"])

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "at least 5 samples" in captured.err
    assert all("analysis" not in record for record in _json_lines(captured.out))


def test_overheat_mode_eventually_reports_critical(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = runner.main(["--mode", "overheat", "--ticks", "200", "--interval", "0", "--seed", "1"])

    records = _json_lines(capsys.readouterr().out)
    assert exit_code == 0
    assert records[-1]["status"] == "Critical"


def test_parser_rejects_unknown_mode() -> None:
    with pytest.raises(SystemExit) as exc_info:
        runner.build_parser().parse_args(["--mode", "stalled"])

    assert exc_info.value.code == 2


def test_parser_rejects_non_positive_ticks() -> None:
    with pytest.raises(SystemExit):
        runner.build_parser().parse_args(["--ticks", "0"])


def test_resolve_config_applies_cli_overrides() -> None:
    args = runner.build_parser().parse_args(["--interval", "0.25", "--log-level", "debug"])

    config = runner.resolve_config(args, MonitorConfig())

    assert config.sample_interval_s == 0.25
    assert config.log_level == "DEBUG"


def test_main_returns_error_code_on_invalid_config(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv("MECHAMIND_HISTORY_CAPACITY", "zero")

    exit_code = runner.main(["--ticks", "1", "--interval", "0"])

    assert exit_code == 2
    assert "[ERROR] Monitor run failed" in capsys.readouterr().err


def test_run_monitor_normalizes_service_failure(capsys: pytest.CaptureFixture[str]) -> None:
    args = runner.build_parser().parse_args(
        ["--mode", "unbalanced", "--ticks", "8", "--interval", "0", "--seed", "4", "--diagnose"]
    )
    config = MonitorConfig(api_key="test-key", sample_interval_s=0.0)
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(503)))

    summary = asyncio.run(runner.run_monitor(args, config, http_client=http_client))

    assert args.mode == OperatingMode.UNBALANCED
    assert len(summary.samples) == 8
    assert summary.analysis is not None
    assert summary.analysis.status == DiagnosisStatus.AT_RISK
    assert summary.buffer_indicator == "8/30"
    assert '"At Risk"' in capsys.readouterr().out
