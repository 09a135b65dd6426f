"""Format handlers for Akai program files."""

from akpconv.formats.akp import AkpReader, parse

__all__ = ["AkpReader", "parse"]
