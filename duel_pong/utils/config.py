"""
Duel Pong game configuration with Pydantic validation

Arena size and physics constants are fixed and live in
``duel_pong.core.constants``; this module only covers presentation and
runtime settings.
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator

logger = logging.getLogger(__name__)


@dataclass
class KeyboardLayout:
    """Configuration for keyboard layouts"""

    name: str
    left_keys: dict[str, int]
    right_keys: dict[str, int]
    display_names: dict[str, str]


ARROW_KEYS = {"up": pygame.K_UP, "down": pygame.K_DOWN}

# Keyboard layouts definition
KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        left_keys={"up": pygame.K_w, "down": pygame.K_s},
        right_keys=ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        left_keys={"up": pygame.K_z, "down": pygame.K_s},  # Z instead of W
        right_keys=ARROW_KEYS,
        display_names={"up": "Z", "down": "S"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        left_keys={"up": pygame.K_w, "down": pygame.K_s},
        right_keys=ARROW_KEYS,
        display_names={"up": "W", "down": "S"},
    ),
}

RGB = tuple[int, int, int]


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation for compatibility with existing code
    model_config = {"validate_assignment": True}

    # Display
    FPS: int = Field(default=60, gt=0, le=240, description="Frames per second")
    WINDOW_TITLE: str = Field(default="Pong", min_length=1, description="Window caption")
    BACKGROUND_COLOR: RGB = Field(default=(0, 0, 0), description="RGB color")
    PLAYER_A_COLOR: RGB = Field(default=(255, 178, 178), description="Left paddle and score")
    PLAYER_B_COLOR: RGB = Field(default=(178, 178, 255), description="Right paddle and score")
    BALL_COLOR: RGB = Field(default=(255, 255, 255), description="RGB color")
    FONT_PATH: str | None = Field(default=None, description="TTF font, None for pygame default")
    FONT_SIZE: int = Field(default=24, gt=0, description="Score label size in pixels")

    # Audio
    SOUND_ENABLED: bool = Field(default=True, description="Play hit and miss cues")
    SOUND_VOLUME: float = Field(default=0.5, ge=0.0, le=1.0, description="Cue volume")
    HIT_SOUND_PATH: str | None = Field(default=None, description="Hit cue, None for 240 Hz tone")
    MISS_SOUND_PATH: str | None = Field(default=None, description="Miss cue, None for 440 Hz tone")

    # Keyboard layout
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    @field_validator("BACKGROUND_COLOR", "PLAYER_A_COLOR", "PLAYER_B_COLOR", "BALL_COLOR")
    @classmethod
    def validate_color(cls, v: RGB) -> RGB:
        """Validate that each channel fits in a byte"""
        if any(not 0 <= channel <= 255 for channel in v):
            raise ValueError(f"Color channels must be within 0..255, got {v}")
        return v

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS[self.KEYBOARD_LAYOUT]

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "duel_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        with open(Path(filepath), "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "duel_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        defaults = GameConfig()
        for field_name in type(self).model_fields.keys():
            setattr(self, field_name, getattr(defaults, field_name))


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "duel_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        logger.info("No configuration file at %s, using defaults", filepath)
        return False
    except (OSError, ValueError) as e:
        # pydantic.ValidationError and json.JSONDecodeError are both ValueErrors
        logger.error("Error loading config from %s: %s", filepath, e)
        return False

    for field_name in GameConfig.model_fields.keys():
        setattr(game_config, field_name, getattr(loaded_config, field_name))
    logger.info("Loaded configuration from %s", filepath)
    return True


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily"""
    old_values: dict[str, Any] = {}
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        old_values = _change_values(game_config, **kwargs)
        yield
    finally:
        _change_values(game_config, **old_values)
