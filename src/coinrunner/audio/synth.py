"""
Waveform generation for the game's sound effects.

Each effect is a single oscillator with an exponential gain ramp,
rendered once into signed 16-bit mono samples.
"""

import math
import array
from enum import Enum
from dataclasses import dataclass

SAMPLE_RATE = 44100


class WaveType(Enum):
    """Oscillator waveform types."""
    SINE = "sine"
    SQUARE = "square"
    SAWTOOTH = "sawtooth"
    TRIANGLE = "triangle"


def oscillator(wave_type: WaveType, t: float, freq: float) -> float:
    """Sample a waveform in [-1, 1] at time t."""
    phase = (t * freq) % 1.0

    if wave_type == WaveType.SINE:
        return math.sin(2 * math.pi * phase)

    elif wave_type == WaveType.SQUARE:
        return 1.0 if phase < 0.5 else -1.0

    elif wave_type == WaveType.SAWTOOTH:
        return 2.0 * phase - 1.0

    elif wave_type == WaveType.TRIANGLE:
        return 4.0 * abs(phase - 0.5) - 1.0

    return 0.0


@dataclass
class ExpRamp:
    """Exponential gain ramp from start to end over duration seconds."""
    start: float = 0.3
    end: float = 0.01
    duration: float = 0.1

    def gain_at(self, t: float) -> float:
        if t >= self.duration:
            return self.end
        return self.start * (self.end / self.start) ** (t / self.duration)


@dataclass(frozen=True)
class Tone:
    """A one-shot sound effect."""
    frequency: float
    duration: float  # seconds
    wave_type: WaveType = WaveType.SINE
    start_gain: float = 0.3
    end_gain: float = 0.01


def render_tone(tone: Tone, sample_rate: int = SAMPLE_RATE) -> array.array:
    """Render a tone to signed 16-bit mono samples."""
    ramp = ExpRamp(start=tone.start_gain, end=tone.end_gain, duration=tone.duration)
    num_samples = int(sample_rate * tone.duration)
    samples = array.array('h')

    for i in range(num_samples):
        t = i / sample_rate
        val = oscillator(tone.wave_type, t, tone.frequency) * ramp.gain_at(t)
        samples.append(int(max(-32767, min(32767, val * 32767))))

    return samples
