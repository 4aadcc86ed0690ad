"""
Adapter: In-process captcha store.

Captchas live in a dict keyed by email, each with an expiry time.
Guarded by a lock because sync routes run on a thread pool.
"""

import hmac
import threading
import time
from typing import Callable

from cats_api.domain.auth.ports import CaptchaStore


class InMemoryCaptchaStore(CaptchaStore):
    """Keeps the latest captcha per email until it is used or expires."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[str, float]] = {}
        self._lock = threading.Lock()

    def save(self, email: str, code: str, ttl_seconds: int) -> None:
        with self._lock:
            self._entries[email.lower()] = (code, self._clock() + ttl_seconds)

    def consume(self, email: str, code: str) -> bool:
        key = email.lower()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return False
            expected, expires_at = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return False
            if not hmac.compare_digest(expected, code):
                return False
            del self._entries[key]
            return True
