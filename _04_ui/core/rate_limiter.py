"""Rate limiting for the Emoji Math web API."""

from __future__ import annotations

import time
from collections import defaultdict, deque
from threading import Lock

from _04_ui.core.config import RATE_LIMIT_REQUESTS, RATE_LIMIT_WINDOW


class RateLimiter:
    """Sliding-window limiter keyed by client id."""

    def __init__(
        self,
        max_requests: int = RATE_LIMIT_REQUESTS,
        window_seconds: float = RATE_LIMIT_WINDOW,
        clock=time.monotonic,
    ):
        self._max_requests = max_requests
        self._window = window_seconds
        self._clock = clock
        self._requests: dict[str, deque[float]] = defaultdict(deque)
        self._lock = Lock()

    def is_allowed(self, client_id: str) -> bool:
        """Record a request and report whether it fits in the window."""
        now = self._clock()
        with self._lock:
            history = self._requests[client_id]
            while history and now - history[0] >= self._window:
                history.popleft()
            if len(history) >= self._max_requests:
                return False
            history.append(now)
            return True

    def reset(self, client_id: str | None = None) -> None:
        with self._lock:
            if client_id is None:
                self._requests.clear()
            else:
                self._requests.pop(client_id, None)
