"""
Program data model.

A Program is the parsed form of one .akp file. It is built once by the
parser and then only read by the converters.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from akpconv.models.keygroup import Keygroup


@dataclass(frozen=True)
class ProgramHeader:
    """
    Contents of the 'prg ' chunk.

    number_of_keygroups is informational; parsing is driven by the
    chunks actually present and never checked against it.
    """

    midi_program_number: int = 0
    number_of_keygroups: int = 0


@dataclass(frozen=True)
class Program:
    """
    An Akai sampler program.

    Attributes:
        header: Program header, if the file had one
        keygroups: Keygroups in file order
    """

    header: Optional[ProgramHeader] = None
    keygroups: Tuple[Keygroup, ...] = ()

    @property
    def has_filter(self) -> bool:
        """Check if any keygroup has a filter chunk."""
        return any(kg.filter is not None for kg in self.keygroups)

    @property
    def has_lfo(self) -> bool:
        """Check if any keygroup has an LFO."""
        return any(kg.has_lfo for kg in self.keygroups)
