"""Unit tests – create_logger / logger_from_env."""
from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from mp_logger import Level, create_logger, logger_from_env
from mp_logger.config import LoggerSettings, MissingRequiredSettingError
from mp_logger.testing import ManualScheduler
from mp_logger.transports import (
    ConsoleTransport,
    LokiConfig,
    LokiTransport,
    NDJsonTransport,
    SyslogConfig,
    SyslogTransport,
)


def _kinds(logger: object) -> list[type]:
    return [type(t) for t in logger.transports]  # type: ignore[attr-defined]


class TestCreateLogger:
    def test_defaults_to_console_only(self) -> None:
        logger = create_logger()
        assert logger.level is Level.INFO
        assert _kinds(logger) == [ConsoleTransport]

    def test_flags_select_transports(self) -> None:
        logger = create_logger(LoggerSettings(level=Level.DEBUG, console=False, ndjson=True))
        assert logger.level is Level.DEBUG
        assert _kinds(logger) == [NDJsonTransport]

    def test_explicit_network_configs(self) -> None:
        logger = create_logger(
            LoggerSettings(console=False),
            loki=LokiConfig(url="http://loki:3100"),
            syslog=SyslogConfig(host="127.0.0.1", port=5514, protocol="udp"),
            scheduler=ManualScheduler(),
        )
        assert _kinds(logger) == [LokiTransport, SyslogTransport]
        asyncio.run(logger.close())

    def test_loki_flag_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOKI_URL", "http://loki:3100")
        monkeypatch.setenv("LOKI_BATCH_SIZE", "25")
        logger = create_logger(LoggerSettings(console=False, loki=True), scheduler=ManualScheduler())
        (transport,) = logger.transports
        assert isinstance(transport, LokiTransport)
        assert transport.config.batch_size == 25
        asyncio.run(logger.close())

    def test_loki_flag_without_url_fails(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LOKI_URL", raising=False)
        with pytest.raises(MissingRequiredSettingError):
            create_logger(LoggerSettings(loki=True))


class TestLoggerFromEnv:
    def test_reads_log_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "warn")
        monkeypatch.setenv("LOG_CONSOLE", "false")
        monkeypatch.setenv("LOG_NDJSON", "true")
        logger = logger_from_env()
        assert logger.level is Level.WARN
        assert _kinds(logger) == [NDJsonTransport]

    def test_reads_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("LOG_LEVEL=silly\nLOG_CONSOLE=0\nLOG_NDJSON=1\n")
        # load_dotenv writes into os.environ; register the keys so teardown removes them
        for key in ("LOG_LEVEL", "LOG_CONSOLE", "LOG_NDJSON"):
            monkeypatch.setenv(key, "")
            monkeypatch.delenv(key)
        logger = logger_from_env(str(env_file))
        assert logger.level is Level.SILLY
        assert _kinds(logger) == [NDJsonTransport]
