"""
Keyboard input for Duel Pong
"""

from collections.abc import Callable
from typing import Any

import pygame

from duel_pong.core.interfaces.input import Control
from duel_pong.utils.config import KeyboardLayout, game_config


class KeyboardInput:
    """Maps the pygame key state onto the four paddle controls"""

    def __init__(
        self,
        layout: KeyboardLayout | None = None,
        get_pressed: Callable[[], Any] | None = None,
    ):
        """
        Initialize keyboard input

        Args:
            layout: Keyboard layout, defaults to the configured one
            get_pressed: Key state getter indexed by pygame key constants,
                defaults to pygame.key.get_pressed
        """
        layout = layout or game_config.get_keyboard_layout()
        self.key_mapping: dict[Control, int] = {
            Control.P1_UP: layout.left_keys["up"],
            Control.P1_DOWN: layout.left_keys["down"],
            Control.P2_UP: layout.right_keys["up"],
            Control.P2_DOWN: layout.right_keys["down"],
        }
        self._get_pressed = get_pressed or pygame.key.get_pressed
        self._keys: Any = None

    def poll(self) -> None:
        """Snapshot the key state for the current frame"""
        self._keys = self._get_pressed()

    def is_pressed(self, control: Control) -> bool:
        if self._keys is None:
            return False
        return bool(self._keys[self.key_mapping[control]])
