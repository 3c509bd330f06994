"""
Unit tests for configuration validation

Tests the configuration system including:
- Field validation through pydantic
- JSON save/load round trips through files
- Context manager for temporary config changes
"""

import json
import logging

import pytest
from pydantic import ValidationError

from duel_pong.utils.config import (
    KEYBOARD_LAYOUTS,
    GameConfig,
    game_config,
    game_config_tmp,
    load_config_from_file,
)


@pytest.fixture
def restore_global_config():
    """Reset the global config after tests that replace it wholesale"""
    yield
    game_config.reset_to_defaults()


class TestGameConfigValidation:
    """Test game configuration validation"""

    def test_valid_default_config(self):
        """Test that default configuration is valid"""
        config = GameConfig()
        assert config.FPS == 60
        assert config.KEYBOARD_LAYOUT == "qwerty"
        assert config.PLAYER_A_COLOR == (255, 178, 178)
        assert config.PLAYER_B_COLOR == (178, 178, 255)
        assert config.FONT_SIZE == 24

    def test_zero_fps(self):
        """Test FPS must be positive"""
        with pytest.raises(ValidationError):
            GameConfig(FPS=0)

    def test_assignment_is_validated(self):
        """Test that invalid assignments are rejected"""
        config = GameConfig()
        with pytest.raises(ValidationError):
            config.SOUND_VOLUME = 1.5
        assert config.SOUND_VOLUME == 0.5

    @pytest.mark.parametrize("color", [(256, 0, 0), (0, -1, 0)])
    def test_color_channels_out_of_range(self, color):
        """Test colors must fit in a byte per channel"""
        with pytest.raises(ValidationError, match="0..255"):
            GameConfig(BALL_COLOR=color)

    def test_unknown_keyboard_layout(self):
        """Test unknown layouts are rejected"""
        with pytest.raises(ValidationError, match="Unknown keyboard layout"):
            GameConfig(KEYBOARD_LAYOUT="dvorak")

    @pytest.mark.parametrize("name", sorted(KEYBOARD_LAYOUTS))
    def test_get_keyboard_layout(self, name):
        """Test every layout maps both directions for both sides"""
        layout = GameConfig(KEYBOARD_LAYOUT=name).get_keyboard_layout()
        assert set(layout.left_keys) == {"up", "down"}
        assert set(layout.right_keys) == {"up", "down"}

    def test_reset_to_defaults(self):
        """Test resetting a modified config"""
        config = GameConfig(FPS=30, SOUND_ENABLED=False)
        config.reset_to_defaults()
        assert config.FPS == 60
        assert config.SOUND_ENABLED is True


class TestConfigFiles:
    """Test saving and loading configuration files"""

    def test_save_and_load(self, tmp_path):
        """Test a saved config loads back with the same values"""
        path = tmp_path / "config.json"
        GameConfig(FPS=120, KEYBOARD_LAYOUT="azerty", BALL_COLOR=(1, 2, 3)).save_to_file(str(path))

        loaded = GameConfig.load_from_file(str(path))

        assert loaded.FPS == 120
        assert loaded.KEYBOARD_LAYOUT == "azerty"
        assert loaded.BALL_COLOR == (1, 2, 3)

    def test_load_missing_file(self, tmp_path):
        """Test loading a missing file raises FileNotFoundError"""
        with pytest.raises(FileNotFoundError):
            GameConfig.load_from_file(str(tmp_path / "missing.json"))

    def test_load_into_global_config(self, tmp_path, restore_global_config):
        """Test loading into the global instance"""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"FPS": 30, "SOUND_ENABLED": False}))

        assert load_config_from_file(str(path)) is True
        assert game_config.FPS == 30
        assert game_config.SOUND_ENABLED is False

    def test_load_missing_into_global_config(self, tmp_path):
        """Test a missing file leaves the global config alone"""
        assert load_config_from_file(str(tmp_path / "missing.json")) is False
        assert game_config.FPS == 60

    def test_load_invalid_file_logs_error(self, tmp_path, caplog):
        """Test an invalid file is reported and ignored"""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"FPS": -5}))

        with caplog.at_level(logging.ERROR, logger="duel_pong.utils.config"):
            assert load_config_from_file(str(path)) is False

        assert "Error loading config" in caplog.text
        assert game_config.FPS == 60

    def test_load_malformed_json(self, tmp_path):
        """Test a file that isn't JSON is ignored"""
        path = tmp_path / "config.json"
        path.write_text("{not json")
        assert load_config_from_file(str(path)) is False


class TestConfigContextManagers:
    """Test configuration context managers"""

    def test_game_config_tmp_restores_values(self):
        """Test that game_config_tmp restores original values"""
        original_fps = game_config.FPS

        with game_config_tmp(FPS=120, SOUND_VOLUME=0.1):
            assert game_config.FPS == 120
            assert game_config.SOUND_VOLUME == 0.1

        assert game_config.FPS == original_fps
        assert game_config.SOUND_VOLUME == 0.5

    def test_game_config_tmp_restores_on_exception(self):
        """Test that config is restored even if exception occurs"""
        original_fps = game_config.FPS

        with pytest.raises(ValueError, match="Test exception"):
            with game_config_tmp(FPS=30):
                assert game_config.FPS == 30
                raise ValueError("Test exception")

        assert game_config.FPS == original_fps

    def test_nested_config_contexts(self):
        """Test nested temporary changes unwind in order"""
        with game_config_tmp(FPS=30):
            with game_config_tmp(FPS=90):
                assert game_config.FPS == 90
            assert game_config.FPS == 30
        assert game_config.FPS == 60

    def test_game_config_tmp_validates(self):
        """Test invalid temporary values are rejected"""
        with pytest.raises(ValidationError):
            with game_config_tmp(KEYBOARD_LAYOUT="dvorak"):
                pass
        assert game_config.KEYBOARD_LAYOUT == "qwerty"
