"""
In-memory sliding-window rate limiter.

Used to throttle booking dispatch per authenticated user. State lives in
process memory, so limits are per worker.
"""

import threading
import time
from collections import deque
from typing import Callable, Deque, Dict, Optional


class RateLimiter:
    """Allow at most ``limit`` hits per ``window`` seconds for each key."""

    def __init__(self, limit: int, window: float, clock: Callable[[], float] = time.monotonic):
        self.limit = limit
        self.window = window
        self._clock = clock
        self._hits: Dict[str, Deque[float]] = {}
        self._lock = threading.Lock()

    def hit(self, key: str) -> Optional[float]:
        """
        Record a hit for ``key``.

        Returns None when the hit is allowed, otherwise the number of seconds
        until the oldest hit in the window expires.
        """
        now = self._clock()
        with self._lock:
            self._prune(now)
            hits = self._hits.get(key, deque())

            if len(hits) >= self.limit:
                oldest = hits[0] if hits else now
                return max(0.0, self.window - (now - oldest))

            hits.append(now)
            self._hits[key] = hits
            return None

    def _prune(self, now: float) -> None:
        # Drop expired hits, and the keys left with none
        for key in list(self._hits):
            hits = self._hits[key]
            while hits and now - hits[0] >= self.window:
                hits.popleft()
            if not hits:
                del self._hits[key]

    def reset(self) -> None:
        with self._lock:
            self._hits.clear()


_booking_limiter: Optional[RateLimiter] = None


def get_booking_limiter(limit: int, window: float) -> RateLimiter:
    """Return the process-wide booking limiter, rebuilding it if the limits changed."""
    global _booking_limiter
    if (
        _booking_limiter is None
        or _booking_limiter.limit != limit
        or _booking_limiter.window != window
    ):
        _booking_limiter = RateLimiter(limit, window)
    return _booking_limiter
