"""
Tests for sound cue synthesis and playback
"""

import logging

import numpy as np
import pygame
import pytest

from duel_pong.core.interfaces.audio import Cue
from duel_pong.gui.audio import HIT_TONE_HZ, PygameAudio, synthesize_tone


class FakeSound:
    """Stand-in for pygame.mixer.Sound"""

    def __init__(self, error: str | None = None):
        self.error = error
        self.plays = 0

    def play(self) -> None:
        if self.error:
            raise pygame.error(self.error)
        self.plays += 1


def audio_with(sounds: dict) -> PygameAudio:
    audio = PygameAudio.__new__(PygameAudio)
    audio.sounds = sounds
    return audio


class TestSynthesizeTone:
    """Tests for tone synthesis"""

    def test_stereo_shape_and_dtype(self):
        """Test one int16 column per channel"""
        tone = synthesize_tone(HIT_TONE_HZ, 0.1, sample_rate=44100, channels=2)
        assert tone.shape == (4410, 2)
        assert tone.dtype == np.int16
        assert tone.flags["C_CONTIGUOUS"]
        assert np.array_equal(tone[:, 0], tone[:, 1])

    def test_mono_is_flat(self):
        """Test a single channel gives a 1-D array"""
        tone = synthesize_tone(440.0, 0.05, sample_rate=8000, channels=1)
        assert tone.shape == (400,)

    def test_amplitude_and_fades(self):
        """Test the peak level and silent edges"""
        tone = synthesize_tone(440.0, 0.1, sample_rate=44100, channels=1, amplitude=0.5)
        peak = np.abs(tone).max()
        assert 0.45 * 32767 < peak <= 0.5 * 32767
        assert tone[0] == 0
        assert abs(int(tone[-1])) < 200

    def test_frequency(self):
        """Test the dominant frequency matches the request"""
        sample_rate = 8000
        tone = synthesize_tone(240.0, 1.0, sample_rate=sample_rate, channels=1)
        spectrum = np.abs(np.fft.rfft(tone))
        freqs = np.fft.rfftfreq(len(tone), 1 / sample_rate)
        assert freqs[np.argmax(spectrum)] == pytest.approx(240.0, abs=1.0)


class TestPygameAudio:
    """Tests for cue playback"""

    def test_play_cue_plays_matching_sound(self):
        """Test each cue plays its own sound"""
        hit, miss = FakeSound(), FakeSound()
        audio = audio_with({Cue.HIT: hit, Cue.MISS: miss})

        audio.play_cue(Cue.HIT)
        audio.play_cue(Cue.HIT)
        audio.play_cue(Cue.MISS)

        assert (hit.plays, miss.plays) == (2, 1)

    def test_playback_failure_is_logged(self, caplog):
        """Test a failing cue is skipped with a warning"""
        audio = audio_with({Cue.HIT: FakeSound(error="no free channel"), Cue.MISS: FakeSound()})

        with caplog.at_level(logging.WARNING, logger="duel_pong.gui.audio"):
            audio.play_cue(Cue.HIT)

        assert "Could not play hit cue" in caplog.text

    def test_missing_mixer_raises(self, monkeypatch):
        """Test tone cues need an initialized mixer"""
        monkeypatch.setattr(pygame.mixer, "get_init", lambda: None)
        with pytest.raises(pygame.error):
            PygameAudio()
