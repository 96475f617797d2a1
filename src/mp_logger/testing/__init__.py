"""Testing support – fakes and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["mp_logger.testing.fixtures"]
"""

from mp_logger.testing.fakes import (
    FailingTransport,
    FakeClock,
    FrozenClock,
    ManualScheduler,
    ManualTimer,
    RecordingTransport,
)

__all__ = [
    "FailingTransport",
    "FakeClock",
    "FrozenClock",
    "ManualScheduler",
    "ManualTimer",
    "RecordingTransport",
]
