"""Unit tests for correlation IDs and structlog configuration."""

from __future__ import annotations

import json
from collections.abc import Iterator

import pytest
import structlog

from master_gate.bootstrap.logging import configure_logging
from master_gate.config.master_config import MasterGateConfig
from master_gate.infrastructure.observability.correlation import (
    correlation_id_processor,
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from master_gate.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
)


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


class TestCorrelation:
    def test_generate_is_unique(self) -> None:
        assert generate_correlation_id() != generate_correlation_id()

    def test_scope_sets_and_restores(self) -> None:
        with correlation_scope("outer"):
            with correlation_scope("inner") as cid:
                assert cid == "inner"
                assert get_correlation_id() == "inner"
            assert get_correlation_id() == "outer"

    def test_set_correlation_id(self) -> None:
        with correlation_scope("scoped"):
            set_correlation_id("replaced")
            assert get_correlation_id() == "replaced"

    def test_scope_generates_when_missing(self) -> None:
        with correlation_scope(None) as cid:
            assert cid
            assert get_correlation_id() == cid

    def test_processor_adds_id(self) -> None:
        with correlation_scope("abc"):
            event = correlation_id_processor(None, "info", {"event": "x"})
        assert event["correlation_id"] == "abc"

    def test_processor_keeps_explicit_id(self) -> None:
        with correlation_scope("abc"):
            event = correlation_id_processor(
                None, "info", {"event": "x", "correlation_id": "explicit"}
            )
        assert event["correlation_id"] == "explicit"


class TestConfigureStructlog:
    def test_production_renders_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_structlog("production")

        with correlation_scope("cid-1"):
            get_logger_for_service("MasterExecutorService").info("instruction_executed")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "instruction_executed"
        assert payload["service"] == "MasterExecutorService"
        assert payload["component"] == "master"
        assert payload["correlation_id"] == "cid-1"
        assert payload["level"] == "info"

    def test_log_level_filters(
        self,
        capsys: pytest.CaptureFixture[str],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        configure_structlog("production")

        structlog.get_logger().info("hidden")
        structlog.get_logger().warning("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out


class TestConfigureLogging:
    """Startup logging follows the gate configuration."""

    def test_production_config_renders_json(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = configure_logging(MasterGateConfig(environment="production"))

        structlog.get_logger().info("gate_started")

        assert config.environment == "production"
        payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert payload["event"] == "gate_started"

    def test_reads_environment_when_no_config(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MASTER_ENVIRONMENT", "production")
        assert configure_logging().environment == "production"
