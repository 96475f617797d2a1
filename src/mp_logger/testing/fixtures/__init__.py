"""Testing fixtures – pytest fixtures for fake doubles.

Enable in ``conftest.py``::

    pytest_plugins = ["mp_logger.testing.fixtures"]
"""
from __future__ import annotations

import pytest

from mp_logger.testing.fakes import FakeClock, ManualScheduler, RecordingTransport


@pytest.fixture
def fake_clock() -> FakeClock:
    """A FakeClock pinned to 2026-01-01 12:00 UTC."""
    return FakeClock()


@pytest.fixture
def manual_scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()


__all__ = ["fake_clock", "manual_scheduler", "recording_transport"]
