"""
Protocols for the collaborators the simulation depends on
"""

from duel_pong.core.interfaces.audio import AudioSink
from duel_pong.core.interfaces.audio import Cue
from duel_pong.core.interfaces.clock import Clock
from duel_pong.core.interfaces.input import Control
from duel_pong.core.interfaces.input import InputSource
from duel_pong.core.interfaces.renderer import RendererProtocol

__all__ = [
    "AudioSink",
    "Clock",
    "Control",
    "Cue",
    "InputSource",
    "RendererProtocol",
]
