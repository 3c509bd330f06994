"""
Clock protocol - time source for the post-point freeze window
"""

from typing import Protocol


class Clock(Protocol):
    """
    Protocol for monotonic time sources.

    The simulation only compares differences between two readings, so the
    origin of the returned value does not matter.
    """

    def now(self) -> float:
        """
        Current time in seconds.

        Returns:
            A monotonically non-decreasing timestamp
        """
        ...
