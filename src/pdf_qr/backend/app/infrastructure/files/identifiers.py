from __future__ import annotations

import secrets
import string
import threading
import time

_ALPHABET = string.digits + string.ascii_lowercase


def to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_ALPHABET[rem])
    return "".join(reversed(digits))


class TimestampIdGenerator:
    """
    Ids look like ``<ns timestamp in base36><random suffix>``.

    The timestamp part is strictly increasing within the process, so two
    calls never return the same id even when the clock does not move.
    """

    def __init__(self, suffix_length: int = 8) -> None:
        self._suffix_length = suffix_length
        self._last_ns = 0
        self._lock = threading.Lock()

    def _next_ns(self) -> int:
        with self._lock:
            now = time.time_ns()
            if now <= self._last_ns:
                now = self._last_ns + 1
            self._last_ns = now
            return now

    def new_id(self) -> str:
        suffix = "".join(secrets.choice(_ALPHABET) for _ in range(self._suffix_length))
        return f"{to_base36(self._next_ns())}{suffix}"
