"""
Program converters for AKP -> SFZ / Decent Sampler.

Example:
    from akpconv.converters import OutputFormat, convert_akp, convert_file

    # Render to a string
    sfz_text = convert_file("piano.akp", OutputFormat.SFZ)

    # Write piano.dspreset next to the source
    convert_akp("piano.akp", output_format=OutputFormat.DECENT_SAMPLER)
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Union

from akpconv.converters.akp_to_dspreset import (
    AkpToDecentSamplerConverter,
    convert_akp_to_dspreset,
    render_dspreset,
)
from akpconv.converters.akp_to_sfz import AkpToSfzConverter, convert_akp_to_sfz, render_sfz


class OutputFormat(Enum):
    """Supported output formats, valued by file extension."""

    SFZ = "sfz"
    DECENT_SAMPLER = "dspreset"

    @classmethod
    def from_name(cls, name: str) -> "OutputFormat":
        """
        Resolve a user-supplied format name.

        Args:
            name: "sfz", "ds", "dspreset", "decent" or "decentsampler"

        Returns:
            Corresponding OutputFormat
        """
        aliases = {
            "sfz": cls.SFZ,
            "ds": cls.DECENT_SAMPLER,
            "dspreset": cls.DECENT_SAMPLER,
            "decent": cls.DECENT_SAMPLER,
            "decentsampler": cls.DECENT_SAMPLER,
        }
        key = name.lower()
        if key not in aliases:
            raise ValueError(f"Unknown output format: {name}")
        return aliases[key]

    @property
    def display_name(self) -> str:
        return "SFZ" if self is OutputFormat.SFZ else "Decent Sampler"


CONVERTERS = {
    OutputFormat.SFZ: AkpToSfzConverter,
    OutputFormat.DECENT_SAMPLER: AkpToDecentSamplerConverter,
}


def convert_file(source_path: Union[str, Path], output_format: OutputFormat = OutputFormat.SFZ) -> str:
    """
    Parse an AKP file and render it in the requested format.

    Args:
        source_path: Path to .akp file
        output_format: Target format

    Returns:
        Rendered text
    """
    return CONVERTERS[output_format]().convert_file(source_path)


def convert_akp(
    source_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
    output_format: OutputFormat = OutputFormat.SFZ,
) -> Path:
    """
    Convert an AKP file and write the result.

    Without output_path the result goes next to the source with the
    format's extension. Nothing is written if parsing fails.

    Returns:
        Path of the written file
    """
    return CONVERTERS[output_format]().convert_and_save(source_path, output_path)


__all__ = [
    "AkpToDecentSamplerConverter",
    "AkpToSfzConverter",
    "OutputFormat",
    "convert_akp",
    "convert_akp_to_dspreset",
    "convert_akp_to_sfz",
    "convert_file",
    "render_dspreset",
    "render_sfz",
]
