"""
Shared fixtures: a controllable clock and scripted collaborators
"""

import pytest

from duel_pong.core.interfaces.audio import Cue
from duel_pong.core.interfaces.input import Control


class FakeClock:
    """Clock that only moves when told to"""

    def __init__(self, start: float = 0.0):
        self.time = start

    def now(self) -> float:
        return self.time

    def advance(self, seconds: float) -> None:
        self.time += seconds


class ScriptedInput:
    """Input source holding a fixed set of controls"""

    def __init__(self, *held: Control):
        self.held = set(held)
        self.queries: list[Control] = []

    def is_pressed(self, control: Control) -> bool:
        self.queries.append(control)
        return control in self.held


class RecordingAudio:
    """Audio sink that remembers the cues it was asked to play"""

    def __init__(self) -> None:
        self.cues: list[Cue] = []

    def play_cue(self, cue: Cue) -> None:
        self.cues.append(cue)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def audio() -> RecordingAudio:
    return RecordingAudio()


@pytest.fixture
def controls() -> ScriptedInput:
    return ScriptedInput()
