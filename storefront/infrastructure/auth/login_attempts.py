# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from threading import Lock
from typing import ClassVar

from storefront.domain.admins.repositories import LoginThrottle
from storefront.shared.logging import logger


@dataclass
class AttemptCounter:
    count: int
    last_attempt: float


class InMemoryLoginThrottle(LoginThrottle):
    """Process-local attempt counter keyed by login identifier.

    Counts reset to 1 once ``lockout_window`` seconds have passed since the
    last counted attempt. Attempts made while the key is locked out are
    reported as ``max_attempts + 1`` but do not refresh ``last_attempt``, so
    the lockout always ends ``lockout_window`` after the last counted attempt.
    """

    MAX_ATTEMPTS: ClassVar[int] = 5
    LOCKOUT_WINDOW: ClassVar[float] = 15 * 60  # 15 minutes in seconds

    def __init__(
        self,
        *,
        max_attempts: int | None = None,
        lockout_window: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._max_attempts = max_attempts or self.MAX_ATTEMPTS
        self._window = lockout_window or self.LOCKOUT_WINDOW
        self._clock = clock
        self._counters: dict[str, AttemptCounter] = {}
        self._last_sweep: float | None = None
        self._lock = Lock()

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._counters)

    def increment(self, key: str) -> int:
        with self._lock:
            now = self._clock()
            self._evict_stale(now)
            counter = self._counters.get(key)

            if counter is None or now - counter.last_attempt > self._window:
                self._counters[key] = AttemptCounter(count=1, last_attempt=now)
                return 1

            if counter.count >= self._max_attempts:
                return counter.count + 1

            counter.count += 1
            counter.last_attempt = now
            if counter.count == self._max_attempts:
                logger.warning(
                    f"login_attempts: limit reached key={key} "
                    f"attempts={counter.count} lockout_window={self._window}s"
                )
            return counter.count

    def _evict_stale(self, now: float) -> None:
        # Caller holds the lock. Sweeps at most once per window.
        if self._last_sweep is not None and now - self._last_sweep < self._window:
            return
        self._last_sweep = now
        stale = [
            key
            for key, counter in self._counters.items()
            if now - counter.last_attempt > self._window
        ]
        for key in stale:
            del self._counters[key]
        if stale:
            logger.debug(f"login_attempts: evicted {len(stale)} stale counters")

    def reset(self, key: str) -> None:
        with self._lock:
            if self._counters.pop(key, None) is not None:
                logger.info(f"login_attempts: cleared attempts key={key}")


__all__ = ["AttemptCounter", "InMemoryLoginThrottle"]
