"""
Input protocol - per-frame state of the four paddle controls
"""

from enum import Enum
from typing import Protocol


class Control(Enum):
    """Logical paddle controls"""

    P1_UP = "p1_up"
    P1_DOWN = "p1_down"
    P2_UP = "p2_up"
    P2_DOWN = "p2_down"


class InputSource(Protocol):
    """
    Protocol for input backends (keyboard, scripted, network, etc.).

    Only the held/released state matters, key press events are not tracked.
    """

    def is_pressed(self, control: Control) -> bool:
        """
        Check whether a control is currently held.

        Args:
            control: Logical control to query

        Returns:
            True while the control is held down
        """
        ...
