"""Testing fakes – in-memory doubles for kernel ports."""
from mp_logger.kernel.time import FrozenClock
from mp_logger.testing.fakes.clock import FakeClock
from mp_logger.testing.fakes.scheduler import ManualScheduler, ManualTimer
from mp_logger.testing.fakes.transport import FailingTransport, RecordingTransport

__all__ = [
    "FailingTransport",
    "FakeClock",
    "FrozenClock",
    "ManualScheduler",
    "ManualTimer",
    "RecordingTransport",
]
