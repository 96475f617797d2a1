"""Diagnostics – the library's own logging, kept apart from the facade."""
from mp_logger.diagnostics.factory import ROOT_LOGGER, DiagnosticsFactory, configure_diagnostics

__all__ = ["DiagnosticsFactory", "ROOT_LOGGER", "configure_diagnostics"]
