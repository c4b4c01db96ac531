"""Millisecond timestamps for snapshot ordering."""

import threading
import time

_lock = threading.Lock()
_last_ms = 0


def now_ms() -> int:
    """
    Current wall-clock time in epoch milliseconds.

    Strictly increasing within one process: if the clock has not advanced
    (or went backwards) since the previous call, the previous value plus
    one is returned instead.
    """
    global _last_ms
    with _lock:
        current = int(time.time() * 1000)
        if current <= _last_ms:
            current = _last_ms + 1
        _last_ms = current
        return current
