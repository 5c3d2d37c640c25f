"""Flow control for calls to hosted APIs.

``RateLimiter`` is a token bucket for per-request limits (completion calls).
``BatchThrottle`` splits ingestion work into fixed-size batches with a
constant pause between them (embedding calls during index build).
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")


class RateLimiter:
    """Token-bucket rate limiter with minute-based capacity.

    The limiter is blocking and conservative so we stay within free-tier
    quotas for external services. A ``requests_per_minute`` value of
    ``None`` or ``<=0`` disables limiting.
    """

    def __init__(self, requests_per_minute: int | None) -> None:
        self.capacity = requests_per_minute if requests_per_minute and requests_per_minute > 0 else None
        self.tokens = float(self.capacity) if self.capacity else None
        self.refill_interval = 60.0 / self.capacity if self.capacity else None
        self.last_refill = time.monotonic()
        self._lock = threading.Lock()

    @property
    def enabled(self) -> bool:
        return self.capacity is not None

    def _refill(self) -> None:
        """Refill tokens based on elapsed time."""
        if self.capacity is None or self.refill_interval is None or self.tokens is None:
            return

        now = time.monotonic()
        elapsed = now - self.last_refill
        tokens_to_add = int(elapsed // self.refill_interval)
        if tokens_to_add > 0:
            self.tokens = min(float(self.capacity), self.tokens + tokens_to_add)
            self.last_refill += tokens_to_add * self.refill_interval

    def acquire(self) -> None:
        """Block until a token is available or limiting is disabled."""
        if self.capacity is None or self.refill_interval is None or self.tokens is None:
            return

        while True:
            with self._lock:
                self._refill()
                if self.tokens >= 1:
                    self.tokens -= 1
                    return
                wait_time = max(self.refill_interval - (time.monotonic() - self.last_refill), 0.0)

            # Sleep outside the lock to allow other threads to progress
            time.sleep(wait_time if wait_time > 0 else self.refill_interval)


class BatchThrottle:
    """Fixed-size batching with a constant delay between batches.

    The delay is unconditional: it does not react to observed load and
    there is no retry. Pass ``sleep`` to replace ``time.sleep`` in tests.
    """

    def __init__(
        self,
        batch_size: int = 20,
        delay_seconds: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be non-negative")
        self.batch_size = batch_size
        self.delay_seconds = delay_seconds
        self._sleep = sleep

    def batches(self, items: Sequence[T]) -> Iterator[list[T]]:
        """Yield consecutive batches, pausing before every batch but the first."""
        for start in range(0, len(items), self.batch_size):
            if start > 0 and self.delay_seconds > 0:
                self._sleep(self.delay_seconds)
            yield list(items[start : start + self.batch_size])
