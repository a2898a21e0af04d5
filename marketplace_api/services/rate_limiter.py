"""In-memory fixed window rate limiting"""
import time
from typing import Dict, Optional, Tuple

from marketplace_api.config import get_settings

settings = get_settings()


class RateLimiter:
    """
    Counts calls per key in fixed windows.

    State lives in process memory, so limits reset on restart and are not
    shared between workers.
    """

    def __init__(self, limit: int, window_seconds: float):
        self.limit = limit
        self.window_seconds = window_seconds
        self._entries: Dict[str, Tuple[int, float]] = {}
        self._next_prune = 0.0

    def __len__(self) -> int:
        return len(self._entries)

    def _prune(self, now: float) -> None:
        # At most once per window
        if now < self._next_prune:
            return
        self._entries = {
            key: entry for key, entry in self._entries.items() if now <= entry[1]
        }
        self._next_prune = now + self.window_seconds

    def check(self, key: str, now: Optional[float] = None) -> bool:
        """Record a call for key; False once the window's limit is reached"""
        now = time.monotonic() if now is None else now
        self._prune(now)
        entry = self._entries.get(key)

        if entry is None or now > entry[1]:
            self._entries[key] = (1, now + self.window_seconds)
            return True

        count, reset_at = entry
        if count >= self.limit:
            return False

        self._entries[key] = (count + 1, reset_at)
        return True

    def reset(self) -> None:
        self._entries.clear()
        self._next_prune = 0.0


email_rate_limiter = RateLimiter(
    settings.email_rate_limit,
    settings.email_rate_window_seconds,
)
