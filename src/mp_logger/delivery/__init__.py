"""Delivery – queueing, backoff and scheduling shared by network transports."""
from mp_logger.delivery.backoff import MAX_RETRY_DELAY, BackoffStrategy, ExponentialBackoff
from mp_logger.delivery.queue import BoundedQueue
from mp_logger.delivery.scheduler import AsyncioScheduler, ScheduledTask, Scheduler

__all__ = [
    "AsyncioScheduler",
    "BackoffStrategy",
    "BoundedQueue",
    "ExponentialBackoff",
    "MAX_RETRY_DELAY",
    "ScheduledTask",
    "Scheduler",
]
