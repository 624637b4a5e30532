"""
Coin Runner Audio Engine.

Synthesizes the jump, coin and game-over effects at startup and plays
them through pygame.mixer. Without an audio device the engine stays
silent and every play call is a no-op.
"""

import pygame
import array
import logging
from typing import Dict, Optional

from coinrunner.audio.synth import SAMPLE_RATE, Tone, WaveType, render_tone

logger = logging.getLogger(__name__)


SOUND_TONES: Dict[str, Tone] = {
    "jump": Tone(frequency=400, duration=0.1, wave_type=WaveType.SQUARE),
    "coin": Tone(frequency=600, duration=0.15, wave_type=WaveType.SINE),
    "game_over": Tone(frequency=200, duration=0.3, wave_type=WaveType.SAWTOOTH),
}


class AudioEngine:
    """Sound effect player for the runner."""

    def __init__(self, volume: float = 1.0):
        self._initialized = False
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        self._volume = max(0.0, min(1.0, volume))
        self._muted = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def init(self) -> bool:
        """Initialize the mixer and synthesize all effects."""
        try:
            pygame.mixer.pre_init(SAMPLE_RATE, -16, 2, 512)
            pygame.mixer.init()
            self._initialized = True
            logger.info("Audio engine initialized")
        except pygame.error as e:
            logger.error(f"Failed to initialize audio: {e}")
            return False

        for name, tone in SOUND_TONES.items():
            self._sounds[name] = self._create_sound(render_tone(tone))
        logger.info(f"Generated {len(self._sounds)} sounds")
        return True

    def _create_sound(self, samples: array.array) -> pygame.mixer.Sound:
        """Create a pygame Sound from mono samples (auto-converted to stereo)."""
        stereo = array.array('h')
        for s in samples:
            stereo.append(s)
            stereo.append(s)
        return pygame.mixer.Sound(buffer=stereo)

    def play(self, sound_name: str) -> Optional[pygame.mixer.Channel]:
        """Play a named effect. Unknown names and a silent engine are ignored."""
        if not self._initialized or self._muted:
            return None

        sound = self._sounds.get(sound_name)
        if sound is None:
            logger.warning(f"Unknown sound: {sound_name}")
            return None

        sound.set_volume(self._volume)
        return sound.play()

    def play_jump(self) -> None:
        self.play("jump")

    def play_coin(self) -> None:
        self.play("coin")

    def play_game_over(self) -> None:
        self.play("game_over")

    def set_volume(self, volume: float) -> None:
        """Set effect volume (0.0 - 1.0)."""
        self._volume = max(0.0, min(1.0, volume))

    def is_muted(self) -> bool:
        return self._muted

    def toggle_mute(self) -> bool:
        """Toggle mute state."""
        self._muted = not self._muted
        logger.info(f"Audio {'muted' if self._muted else 'unmuted'}")
        return self._muted

    def cleanup(self) -> None:
        """Cleanup audio resources."""
        if self._initialized:
            pygame.mixer.quit()
            self._initialized = False
            logger.info("Audio engine cleaned up")


# Global audio engine instance
_audio_engine: Optional[AudioEngine] = None


def get_audio_engine(volume: float = 1.0) -> AudioEngine:
    """Get the global audio engine instance."""
    global _audio_engine
    if _audio_engine is None:
        _audio_engine = AudioEngine(volume=volume)
    return _audio_engine
