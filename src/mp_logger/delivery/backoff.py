"""Delivery – backoff strategies."""
from __future__ import annotations

import abc

MAX_RETRY_DELAY = 30.0


class BackoffStrategy(abc.ABC):
    """Compute wait duration (seconds) after the *attempt*-th failure."""

    @abc.abstractmethod
    def compute(self, attempt: int) -> float: ...


class ExponentialBackoff(BackoffStrategy):
    """Delay doubles per failure: ``base_delay * 2^(attempt - 1)``, capped.

    ``attempt`` is 1-based, so the first retry waits exactly
    ``base_delay``.
    """

    def __init__(self, base_delay: float = 1.0, max_delay: float = MAX_RETRY_DELAY) -> None:
        if base_delay < 0 or max_delay < 0:
            raise ValueError("delays must be non-negative")
        self._base = base_delay
        self._max = max_delay

    @property
    def base_delay(self) -> float:
        return self._base

    @property
    def max_delay(self) -> float:
        return self._max

    def compute(self, attempt: int) -> float:
        if attempt < 1:
            return 0.0
        # 2 ** 1075 overflows float; anything past the cap is the cap anyway.
        exponent = min(attempt - 1, 64)
        return min(self._base * (2 ** exponent), self._max)


__all__ = ["BackoffStrategy", "ExponentialBackoff", "MAX_RETRY_DELAY"]
