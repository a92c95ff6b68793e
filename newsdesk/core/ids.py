"""Identifier utilities for content blocks."""

from __future__ import annotations

import secrets
import threading
import time

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
_MIN_LENGTH = 9
_LAST_MILLIS = 0
_COUNTER = 0
_LOCK = threading.Lock()


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    chars: list[str] = []
    current = value
    while current:
        current, remainder = divmod(current, 36)
        chars.append(_ALPHABET[remainder])
    return "".join(reversed(chars))


def _random_alnum(length: int) -> str:
    return "".join(secrets.choice(_ALPHABET) for _ in range(max(length, 0)))


def generate_cuid(length: int = 24) -> str:
    """Generate a collision-resistant lowercase block id with a `c` prefix.

    The id is time ordered within a process: millisecond timestamp, then a
    per-millisecond counter, then random padding up to ``length``.
    """
    global _LAST_MILLIS, _COUNTER

    now_millis = int(time.time() * 1000)
    with _LOCK:
        if now_millis == _LAST_MILLIS:
            _COUNTER += 1
        else:
            _LAST_MILLIS = now_millis
            _COUNTER = 0
        counter = _COUNTER

    body_len = max(length, _MIN_LENGTH) - 1
    static_part = f"{_to_base36(now_millis)}{_to_base36(counter).rjust(4, '0')}"
    random_part = _random_alnum(max(body_len - len(static_part), 4))
    # Keep the random tail when truncating so short ids stay unique.
    if len(static_part) + len(random_part) > body_len:
        static_part = static_part[-(body_len - len(random_part)) :]
    return f"c{static_part}{random_part}"
