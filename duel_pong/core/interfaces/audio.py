"""
Audio protocol - fire-and-forget sound cues
"""

from enum import Enum
from typing import Protocol


class Cue(Enum):
    """Sound cues triggered by the match"""

    HIT = "hit"
    MISS = "miss"


class AudioSink(Protocol):
    """
    Protocol for audio backends.

    Playback must not block the caller. Overlapping instances of the same
    cue are allowed.
    """

    def play_cue(self, cue: Cue) -> None:
        """
        Start playing a cue and return immediately.

        Args:
            cue: Cue to play
        """
        ...
