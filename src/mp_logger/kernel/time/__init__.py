"""Kernel time – clocks used to stamp log entries."""
from mp_logger.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
