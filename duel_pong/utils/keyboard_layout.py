"""
Keyboard layout detection and management for Duel Pong
"""

import json
import locale
import logging
import os
from pathlib import Path

from duel_pong.utils.config import KEYBOARD_LAYOUTS, game_config

logger = logging.getLogger(__name__)


def layout_for_locale(locale_name: str) -> str:
    """Map a locale or LANG value to a keyboard layout name"""
    locale_name = locale_name.lower()
    if locale_name.startswith("fr"):
        return "azerty"
    if locale_name.startswith("de"):
        return "qwertz"
    return "qwerty"


def detect_system_layout() -> str:
    """
    Detect the most likely keyboard layout based on system locale

    Returns:
        Keyboard layout name (default to 'qwerty' if detection fails)
    """
    system_locale = locale.getlocale()[0]
    if system_locale:
        return layout_for_locale(system_locale)

    # Fallback to environment variables
    return layout_for_locale(os.environ.get("LANG", ""))


def get_config_file_path() -> Path:
    """Get the path to the user configuration file"""
    return Path.home() / ".config" / "duel_pong" / "user_config.json"


def load_user_preferences() -> dict:
    """Load user preferences from config file"""
    config_file = get_config_file_path()

    if config_file.exists():
        try:
            with open(config_file, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable preferences file %s: %s", config_file, e)

    return {}


def save_user_preferences(preferences: dict) -> None:
    """Save user preferences to config file"""
    config_file = get_config_file_path()

    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(preferences, f, indent=2, ensure_ascii=False)
    except OSError as e:
        logger.warning("Could not save preferences to %s: %s", config_file, e)


def get_preferred_layout() -> str:
    """
    Get the user's preferred keyboard layout

    Priority:
    1. User saved preference
    2. System detection
    """
    layout = load_user_preferences().get("keyboard_layout")
    if layout in KEYBOARD_LAYOUTS:
        return layout

    return detect_system_layout()


def set_preferred_layout(layout: str) -> bool:
    """
    Persist the user's preferred keyboard layout and apply it

    Args:
        layout: Layout name (must be in KEYBOARD_LAYOUTS)

    Returns:
        True if successful, False otherwise
    """
    if layout not in KEYBOARD_LAYOUTS:
        return False

    user_prefs = load_user_preferences()
    user_prefs["keyboard_layout"] = layout
    save_user_preferences(user_prefs)

    game_config.KEYBOARD_LAYOUT = layout
    return True


def auto_configure_layout() -> str:
    """
    Automatically configure the best keyboard layout

    Returns:
        The selected layout name
    """
    preferred = get_preferred_layout()
    game_config.KEYBOARD_LAYOUT = preferred
    return preferred


def show_layout_help() -> str:
    """Generate help text showing current key mappings"""
    layout = game_config.get_keyboard_layout()
    return (
        f"Keyboard layout: {layout.name}\n"
        f"  Player 1 (left):  up {layout.display_names['up']}, "
        f"down {layout.display_names['down']}\n"
        "  Player 2 (right): up ↑, down ↓\n"
        "  ESC: quit"
    )
