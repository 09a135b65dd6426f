"""
Keygroup parameter blocks and their enumerations.

Each block holds the raw bytes of one AKP sub-chunk. Values stay in the
source's own units (mostly 0-100 positions); scaling to seconds, dB or Hz
belongs to the converters.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class _RawEnum(IntEnum):
    @classmethod
    def from_raw(cls, value: int) -> Optional["_RawEnum"]:
        """
        Look up a raw byte.

        Args:
            value: Raw value from the file

        Returns:
            Matching member, or None when the value is not in the table
        """
        try:
            return cls(value)
        except ValueError:
            return None


class FilterType(_RawEnum):
    """Filter modes of the 'filt' chunk."""

    OFF = 0
    LOWPASS = 1
    BANDPASS = 2
    HIGHPASS = 3


class LfoWaveform(_RawEnum):
    """LFO shapes of the 'lfo ' chunk."""

    TRIANGLE = 0
    SINE = 1
    SQUARE = 2
    SAW = 3
    RAMP = 4
    RANDOM = 5


class ModSource(_RawEnum):
    """Modulation sources of the 'mods' chunk."""

    LFO1 = 0
    MOD_WHEEL = 1  # CC1
    AFTERTOUCH = 2
    KEY = 3
    KEY_GATE = 4  # Note on/off
    VELOCITY = 5
    LFO2 = 6
    PITCH_BEND = 7
    CHANNEL_PRESSURE = 8
    POLY_PRESSURE = 9
    BREATH = 10  # CC2
    FOOT = 11  # CC4
    EXPRESSION = 12  # CC11


class ModDestination(_RawEnum):
    """Modulation destinations of the 'mods' chunk."""

    PITCH = 0
    CUTOFF = 1
    RESONANCE = 2
    VOLUME = 3
    PAN = 4
    LFO1_RATE = 5
    LFO2_RATE = 6
    AMP_ATTACK = 7
    AMP_DECAY = 8
    AMP_SUSTAIN = 9
    AMP_RELEASE = 10
    FILTER_ATTACK = 11
    FILTER_DECAY = 12
    FILTER_SUSTAIN = 13
    FILTER_RELEASE = 14
    AMP_LFO_DEPTH = 15
    FILTER_LFO_DEPTH = 16
    PITCH_LFO_DEPTH = 17


@dataclass(frozen=True)
class Sample:
    """
    Sample reference.

    Attributes:
        filename: Sample path as stored on the sampler (backslash separated)
    """

    filename: str


@dataclass(frozen=True)
class Tune:
    """Level and tuning."""

    level: int = 0  # 0-100
    semitone: int = 0  # Signed, nominally -36..+36
    fine_tune: int = 0  # Signed cents


@dataclass(frozen=True)
class Filter:
    """Filter settings."""

    cutoff: int = 0  # 0-100
    resonance: int = 0  # 0-100
    filter_type: int = 0  # FilterType value

    @property
    def enabled(self) -> bool:
        return self.filter_type > 0


@dataclass(frozen=True)
class Envelope:
    """ADSR envelope, every stage a 0-100 position."""

    attack: int = 0
    decay: int = 0
    sustain: int = 0
    release: int = 0


@dataclass(frozen=True)
class Lfo:
    """Low frequency oscillator."""

    waveform: int = 0  # LfoWaveform value
    rate: int = 0
    delay: int = 0
    depth: int = 0


@dataclass(frozen=True)
class Modulation:
    """
    A single modulation routing.

    Source and destination are kept raw so values unknown to this
    version survive parsing; converters drop them when rendering.
    """

    source: int = 0
    destination: int = 0
    amount: int = 50  # 0-100, 50 = no effect

    @property
    def source_type(self) -> Optional[ModSource]:
        return ModSource.from_raw(self.source)

    @property
    def destination_type(self) -> Optional[ModDestination]:
        return ModDestination.from_raw(self.destination)
