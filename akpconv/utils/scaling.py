"""
Parameter scaling curves.

AKP stores most parameters as 0-100 positions. Target formats want dB,
seconds and Hz, so each parameter goes through one of the curves below.
Both converters share them; per-format floors are passed in by the caller.

Every step is rounded to single precision so rendered values match
existing converter output digit for digit.
"""

import math
import struct
from typing import Optional

# Exponential curve constants (exponent at raw == 100)
AMP_ATTACK_CURVE = 4.0
AMP_DECAY_CURVE = 4.0
AMP_RELEASE_CURVE = 5.0
FILTER_ATTACK_CURVE = 5.0
FILTER_DECAY_CURVE = 5.0
FILTER_RELEASE_CURVE = 6.0

_F32 = struct.Struct("<f")


def to_f32(value: float) -> float:
    """Round a float to the nearest IEEE 754 single-precision value."""
    return _F32.unpack(_F32.pack(value))[0]


def _position(raw: int) -> float:
    """raw / 100 in single precision."""
    return to_f32(raw / 100.0)


def level_to_db(level: int) -> float:
    """Map a 0-100 level to -60..+6 dB."""
    return to_f32(to_f32(_position(level) * 66.0) - 60.0)


def envelope_time(raw: int, curve: float, zero_value: Optional[float] = None) -> float:
    """
    Convert a 0-100 envelope position to seconds.

    time = exp(raw / 100 * curve) * 0.001

    Args:
        raw: Envelope position (0-100)
        curve: Exponent reached at raw == 100
        zero_value: Value returned for raw == 0 instead of the curve's 0.001.
            None keeps the curve value.

    Returns:
        Time in seconds
    """
    if raw == 0 and zero_value is not None:
        return to_f32(zero_value)
    exponent = to_f32(_position(raw) * curve)
    return to_f32(to_f32(math.exp(exponent)) * to_f32(0.001))


def cutoff_to_hz(cutoff: int) -> float:
    """Map a 0-100 cutoff to 20 Hz - 20 kHz on a log scale."""
    return to_f32(20.0 * to_f32(math.pow(1000.0, _position(cutoff))))


def resonance_to_db(resonance: int) -> float:
    """Map a 0-100 resonance to 0-40 dB."""
    return to_f32(_position(resonance) * 40.0)


def lfo_rate_to_hz(rate: int) -> float:
    """Map a 0-100 LFO rate to 0.1 - 30 Hz on a log scale."""
    return to_f32(to_f32(0.1) * to_f32(math.pow(300.0, _position(rate))))


def lfo_delay_seconds(delay: int) -> float:
    """LFO delay, 0-10 seconds."""
    return to_f32(_position(delay) * 10.0)


def lfo_fade_seconds(delay: int) -> float:
    """LFO fade-in, half the delay range (0-5 seconds)."""
    return to_f32(_position(delay) * 5.0)


def bipolar(amount: int) -> float:
    """Map a 0-100 amount centred on 50 to -1..+1."""
    return to_f32(to_f32(_position(amount) * 2.0) - 1.0)


def modulation_amount(amount: int, scale: float) -> float:
    """Bipolar amount times a destination scale."""
    return to_f32(bipolar(amount) * to_f32(scale))


def sustain_fraction(sustain: int) -> float:
    """Map a 0-100 sustain level to 0..1."""
    return _position(sustain)
