"""Wall clock helpers."""

import time
from typing import Callable

# Milliseconds since the epoch, injectable wherever elapsed time matters
Clock = Callable[[], int]


def now_ms() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)
