"""Akai AKP program format handlers."""

from akpconv.formats.akp.parser import AkpParser
from akpconv.formats.akp.reader import AkpReader, parse
from akpconv.formats.akp.riff import ChunkHeader, read_chunk_header, validate_container

__all__ = [
    "AkpParser",
    "AkpReader",
    "ChunkHeader",
    "parse",
    "read_chunk_header",
    "validate_container",
]
