"""
Keygroup data model.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from akpconv.models.parameters import Envelope, Filter, Lfo, Modulation, Sample, Tune


@dataclass(frozen=True)
class Keygroup:
    """
    One zone of the keyboard with its own sound settings.

    Attributes:
        low_key: Lowest MIDI note (0-127)
        high_key: Highest MIDI note (0-127)
        low_vel: Lowest velocity (0-127)
        high_vel: Highest velocity (0-127)
        sample: Sample reference
        tune: Level and tuning
        filter: Filter settings
        amp_env: First envelope in the keygroup
        filter_env: Second envelope
        aux_env: Third envelope (parsed, not rendered)
        lfo1: First LFO
        lfo2: Second LFO
        mods: Modulation routings in file order
    """

    low_key: int = 0
    high_key: int = 0
    low_vel: int = 0
    high_vel: int = 0
    sample: Optional[Sample] = None
    tune: Optional[Tune] = None
    filter: Optional[Filter] = None
    amp_env: Optional[Envelope] = None
    filter_env: Optional[Envelope] = None
    aux_env: Optional[Envelope] = None
    lfo1: Optional[Lfo] = None
    lfo2: Optional[Lfo] = None
    mods: Tuple[Modulation, ...] = ()

    @property
    def key_range(self) -> Tuple[int, int]:
        return (self.low_key, self.high_key)

    @property
    def velocity_range(self) -> Tuple[int, int]:
        return (self.low_vel, self.high_vel)

    @property
    def has_lfo(self) -> bool:
        return self.lfo1 is not None or self.lfo2 is not None
