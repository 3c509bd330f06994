"""
Wall clock used by the live game
"""

import time


class MonotonicClock:
    """Clock backed by time.monotonic()"""

    def now(self) -> float:
        return time.monotonic()
