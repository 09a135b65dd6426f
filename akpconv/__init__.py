"""
akpconv - Converter for Akai AKP sampler programs.

This library provides tools to:
- Parse Akai S5000/S6000 program files (.akp) into a Program model
- Render programs as SFZ (.sfz) text
- Render programs as Decent Sampler (.dspreset) presets

Example usage:
    from akpconv import parse, render_sfz

    with open("piano.akp", "rb") as f:
        program = parse(f)

    sfz_text = render_sfz(program)
"""

__version__ = "1.0.0"
__author__ = "akpconv Contributors"

from akpconv.formats.akp.reader import AkpReader, parse
from akpconv.models.program import Program, ProgramHeader
from akpconv.models.keygroup import Keygroup
from akpconv.converters import (
    OutputFormat,
    convert_akp,
    convert_file,
    render_dspreset,
    render_sfz,
)
from akpconv.utils.validation import AkpError

__all__ = [
    "AkpError",
    "AkpReader",
    "Keygroup",
    "OutputFormat",
    "Program",
    "ProgramHeader",
    "convert_akp",
    "convert_file",
    "parse",
    "render_dspreset",
    "render_sfz",
]
