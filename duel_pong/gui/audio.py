"""
Sound cues for Duel Pong
"""

import logging

import numpy as np
import pygame

from duel_pong.core.interfaces.audio import Cue

logger = logging.getLogger(__name__)

# Default cues are plain sine tones
HIT_TONE_HZ = 240.0
MISS_TONE_HZ = 440.0
TONE_DURATION = 0.12
FADE_DURATION = 0.005

MIXER_FREQUENCY = 44100
MIXER_SIZE = -16
MIXER_CHANNELS = 2
MIXER_BUFFER = 256


def synthesize_tone(
    frequency: float,
    duration: float,
    sample_rate: int = MIXER_FREQUENCY,
    channels: int = MIXER_CHANNELS,
    amplitude: float = 0.5,
) -> np.ndarray:
    """
    Builds a signed 16-bit sine tone suitable for pygame.sndarray

    Args:
        frequency: Tone frequency in Hz
        duration: Length in seconds
        sample_rate: Samples per second
        channels: 1 for a flat array, more for one column per channel
        amplitude: Peak level in [0, 1]

    Returns:
        Array of shape (n,) for mono or (n, channels) otherwise
    """
    n_samples = int(sample_rate * duration)
    t = np.arange(n_samples) / sample_rate
    wave = amplitude * np.sin(2 * np.pi * frequency * t)

    # Short ramps at both ends to avoid clicks
    fade = min(n_samples // 2, int(sample_rate * FADE_DURATION))
    if fade > 0:
        ramp = np.linspace(0.0, 1.0, fade)
        wave[:fade] *= ramp
        wave[-fade:] *= ramp[::-1]

    samples = (wave * np.iinfo(np.int16).max).astype(np.int16)
    if channels > 1:
        samples = np.repeat(samples[:, np.newaxis], channels, axis=1)
    return np.ascontiguousarray(samples)


class PygameAudio:
    """Fire-and-forget cue playback through pygame.mixer"""

    def __init__(
        self,
        hit_path: str | None = None,
        miss_path: str | None = None,
        volume: float = 0.5,
    ):
        """
        Load or synthesize both cues. pygame.mixer must be initialized.

        Raises:
            pygame.error: If the mixer is unavailable or a sound can't be decoded
            FileNotFoundError: If a sound file is missing
        """
        self.sounds: dict[Cue, pygame.mixer.Sound] = {
            Cue.HIT: self._load_sound(hit_path, HIT_TONE_HZ),
            Cue.MISS: self._load_sound(miss_path, MISS_TONE_HZ),
        }
        for sound in self.sounds.values():
            sound.set_volume(volume)

    @staticmethod
    def _load_sound(path: str | None, tone_hz: float) -> pygame.mixer.Sound:
        if path is not None:
            logger.info("Loading sound %s", path)
            return pygame.mixer.Sound(path)

        mixer_settings = pygame.mixer.get_init()
        if mixer_settings is None:
            raise pygame.error("mixer not initialized")
        frequency, _size, channels = mixer_settings
        tone = synthesize_tone(tone_hz, TONE_DURATION, frequency, channels)
        return pygame.sndarray.make_sound(tone)

    def play_cue(self, cue: Cue) -> None:
        try:
            self.sounds[cue].play()
        except pygame.error as e:
            logger.warning("Could not play %s cue: %s", cue.value, e)
