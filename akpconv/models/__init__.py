"""Data models for AKP program representation."""

from akpconv.models.keygroup import Keygroup
from akpconv.models.parameters import (
    Envelope,
    Filter,
    FilterType,
    Lfo,
    LfoWaveform,
    ModDestination,
    Modulation,
    ModSource,
    Sample,
    Tune,
)
from akpconv.models.program import Program, ProgramHeader

__all__ = [
    "Program",
    "ProgramHeader",
    "Keygroup",
    "Sample",
    "Tune",
    "Filter",
    "FilterType",
    "Envelope",
    "Lfo",
    "LfoWaveform",
    "Modulation",
    "ModSource",
    "ModDestination",
]
