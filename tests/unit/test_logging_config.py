"""Unit tests for buoyview.core.logging_config."""

from __future__ import annotations

import json
from pathlib import Path

import structlog

from buoyview.core.logging_config import configure_logging, viewer_log_level


class TestConfigureLogging:
    def test_log_file_receives_json_lines(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "buoyview.log"
        configure_logging("DEBUG", str(log_file))
        structlog.get_logger().debug("input_event", kind="key", code="down")
        configure_logging("WARNING", "")  # closes the file handle

        lines = log_file.read_text().splitlines()
        assert len(lines) == 1
        record = json.loads(lines[0])
        assert record["event"] == "input_event"
        assert record["code"] == "down"
        assert record["level"] == "debug"
        assert "timestamp" in record

    def test_level_filters(self, tmp_path: Path) -> None:
        log_file = tmp_path / "buoyview.log"
        configure_logging("WARNING", str(log_file))
        log = structlog.get_logger()
        log.info("fetch_started", url="http://example.org")
        log.warning("slow_feed")
        configure_logging("WARNING", "")

        events = [json.loads(line)["event"] for line in log_file.read_text().splitlines()]
        assert events == ["slow_feed"]

    def test_appends_across_runs(self, tmp_path: Path) -> None:
        log_file = tmp_path / "buoyview.log"
        for _ in range(2):
            configure_logging("INFO", str(log_file))
            structlog.get_logger().info("run")
        configure_logging("WARNING", "")
        assert len(log_file.read_text().splitlines()) == 2


class TestViewerLogLevel:
    def test_debug_raised_without_log_file(self) -> None:
        assert viewer_log_level("DEBUG") == "WARNING"
        assert viewer_log_level("info", "") == "WARNING"

    def test_debug_kept_with_log_file(self) -> None:
        assert viewer_log_level("DEBUG", "/tmp/buoyview.log") == "DEBUG"

    def test_higher_levels_unchanged(self) -> None:
        assert viewer_log_level("WARNING") == "WARNING"
        assert viewer_log_level("ERROR") == "ERROR"
