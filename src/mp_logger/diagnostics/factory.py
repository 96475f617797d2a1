"""Diagnostics – route the library's own stdlib loggers through structlog.

Transports report queue evictions, retries and reconnects on stdlib
loggers under the ``mp_logger`` namespace (only when their ``debug`` flag
is set).  Events are short names (``loki.batch_failed``) with fields passed
through ``extra``; :func:`configure_diagnostics` renders them with
structlog's :class:`~structlog.stdlib.ProcessorFormatter`.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

ROOT_LOGGER = "mp_logger"

_HANDLER_NAME = "mp_logger.diagnostics"


def _processors() -> list[Any]:
    return [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


class DiagnosticsFactory:
    """Attach a structlog-rendered handler to the ``mp_logger`` logger."""

    @staticmethod
    def configure(
        level: int | str = logging.DEBUG,
        json: bool = False,
        stream: TextIO | None = None,
    ) -> logging.Handler:
        renderer: Any = (
            structlog.processors.JSONRenderer()
            if json
            else structlog.dev.ConsoleRenderer(colors=False)
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_processors(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.format_exc_info,
                renderer,
            ],
        )
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(formatter)

        root = logging.getLogger(ROOT_LOGGER)
        for existing in list(root.handlers):
            if existing.get_name() == _HANDLER_NAME:
                root.removeHandler(existing)
        root.addHandler(handler)
        root.setLevel(level)
        root.propagate = False
        return handler


def configure_diagnostics(
    level: int | str = logging.DEBUG,
    json: bool = False,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Shortcut for :meth:`DiagnosticsFactory.configure`."""
    return DiagnosticsFactory.configure(level=level, json=json, stream=stream)


__all__ = ["DiagnosticsFactory", "ROOT_LOGGER", "configure_diagnostics"]
