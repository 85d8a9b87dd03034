"""Wall clock implementation."""

import time


class SystemClock:
    """Clock implementation using wall-clock time."""

    def now(self) -> float:
        return time.time()
