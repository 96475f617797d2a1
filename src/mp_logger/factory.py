"""Factory – build a ready Logger from settings."""
from __future__ import annotations

from mp_logger.config.logger import LoggerSettings
from mp_logger.delivery.scheduler import Scheduler
from mp_logger.kernel.contracts import Transport
from mp_logger.kernel.time import Clock
from mp_logger.logger import Logger
from mp_logger.transports.console import ConsoleTransport
from mp_logger.transports.loki import LokiConfig, LokiTransport
from mp_logger.transports.ndjson import NDJsonTransport
from mp_logger.transports.syslog import SyslogConfig, SyslogTransport


def create_logger(
    settings: LoggerSettings | None = None,
    *,
    loki: LokiConfig | None = None,
    syslog: SyslogConfig | None = None,
    clock: Clock | None = None,
    scheduler: Scheduler | None = None,
) -> Logger:
    """Assemble a :class:`Logger` and its transports.

    A network transport is built when its flag is set in *settings* or its
    config is passed explicitly.  A flag without a config reads the config
    from the environment (``LOKI_*`` / ``SYSLOG_*``).

    Raises
    ------
    ConfigError
        When an enabled transport is misconfigured (e.g. ``LOKI_URL`` unset).
    """
    settings = settings or LoggerSettings()
    transports: list[Transport] = []

    if settings.console:
        transports.append(ConsoleTransport(settings.console_format, settings.colors))
    if settings.ndjson:
        transports.append(NDJsonTransport())
    if settings.loki or loki is not None:
        loki = loki or LokiConfig.from_env()
        transports.append(LokiTransport(loki, scheduler=scheduler))
    if settings.syslog or syslog is not None:
        syslog = syslog or SyslogConfig.from_env()
        transports.append(SyslogTransport(syslog, scheduler=scheduler))

    return Logger(level=settings.level, transports=transports, clock=clock)


def logger_from_env(env_file: str | None = None) -> Logger:
    """Build a :class:`Logger` from ``LOG_*`` variables, optionally loading *env_file* first."""
    return create_logger(LoggerSettings.from_env(env_file))


__all__ = ["create_logger", "logger_from_env"]
