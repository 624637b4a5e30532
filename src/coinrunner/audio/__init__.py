"""
Coin Runner Audio System.

Oscillator-synthesized arcade sound effects.
"""

from .engine import AudioEngine, get_audio_engine

__all__ = ["AudioEngine", "get_audio_engine"]
