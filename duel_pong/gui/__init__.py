"""
PyGame front end for Duel Pong
"""

from duel_pong.gui.audio import PygameAudio
from duel_pong.gui.game_app import PongApp
from duel_pong.gui.game_app import StartupError
from duel_pong.gui.keyboard_input import KeyboardInput
from duel_pong.gui.pygame_renderer import PygameRenderer

__all__ = ["PongApp", "StartupError", "PygameAudio", "PygameRenderer", "KeyboardInput"]
