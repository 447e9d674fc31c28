# ─────────────────────────────────────────────────────────────────────────────
# Rate Limiting — generation quota + HTTP flood guard
# ─────────────────────────────────────────────────────────────────────────────
# Two independent gates:
#   RateLimiter: one global trailing-window quota on generation requests,
#                shared by every /api/generate-* endpoint. Checked once per
#                request (a 10-plant request costs one admission).
#   limiter: slowapi, per client IP, guards the HTTP layer itself.
# The slowapi instance lives here to avoid circular imports between main.py
# (which imports route modules) and route modules (which need the limiter).
# ─────────────────────────────────────────────────────────────────────────────

from __future__ import annotations

import math
import threading
import time
from collections import deque
from collections.abc import Callable

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)


class RateLimiter:
    """Trailing-window admission gate.

    Keeps the timestamps of admitted requests in ascending order. Each check
    trims the expired prefix, then admits iff fewer than max_requests remain.
    The clock is injectable so tests can drive time explicitly.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._admitted: deque[float] = deque()
        self._lock = threading.Lock()

    def _trim(self, now: float) -> None:
        cutoff = now - self.window_seconds
        while self._admitted and self._admitted[0] < cutoff:
            self._admitted.popleft()

    def check(self) -> bool:
        """Admit (and record) one request, or reject it."""
        with self._lock:
            now = self._clock()
            self._trim(now)
            if len(self._admitted) < self.max_requests:
                self._admitted.append(now)
                return True
            return False

    def retry_after_seconds(self) -> int:
        """Whole seconds until the oldest admitted request leaves the window."""
        with self._lock:
            now = self._clock()
            self._trim(now)
            if not self._admitted:
                return 1
            remaining = self.window_seconds - (now - self._admitted[0])
            return max(1, math.ceil(remaining))

    @property
    def in_window(self) -> int:
        """Requests currently counted against the quota."""
        with self._lock:
            self._trim(self._clock())
            return len(self._admitted)
