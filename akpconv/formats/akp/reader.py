"""
AKP program file reader.

Reads .akp files (Akai S5000/S6000 programs) into the Program model.
"""

import io
import logging
from pathlib import Path
from typing import BinaryIO, Union

from akpconv.formats.akp.parser import AkpParser
from akpconv.formats.akp.riff import CHUNK_HEADER_SIZE, read_chunk_header, validate_container
from akpconv.models.program import Program
from akpconv.utils.validation import (
    AkpError,
    MissingRequiredChunkError,
    validate_akp_header,
)

logger = logging.getLogger(__name__)


class AkpReader:
    """
    Reader for Akai AKP program files.

    Example:
        program = AkpReader.read("piano.akp")
        print(f"{len(program.keygroups)} keygroups")
    """

    def __init__(self):
        self.parser = AkpParser()

    @classmethod
    def read(cls, filepath: Union[str, Path]) -> Program:
        """
        Read an AKP file and return a Program.

        Args:
            filepath: Path to .akp file

        Returns:
            Parsed Program object
        """
        reader = cls()
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> Program:
        """
        Parse an AKP file.

        Args:
            filepath: Path to .akp file

        Returns:
            Parsed Program object
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        with open(filepath, "rb") as f:
            return self.parse_stream(f)

    def parse_bytes(self, data: bytes) -> Program:
        """
        Parse AKP data from bytes.

        Args:
            data: Raw .akp file contents

        Returns:
            Parsed Program object
        """
        return self.parse_stream(io.BytesIO(data))

    def parse_stream(self, stream: BinaryIO) -> Program:
        """
        Parse AKP data from a seekable binary stream.

        Args:
            stream: Stream positioned at the start of the file

        Returns:
            Parsed Program object

        Raises:
            AkpError: On any structural or range problem. No partial
                Program is returned.
        """
        start = stream.tell()
        end_pos = stream.seek(0, io.SEEK_END)
        stream.seek(start)

        validate_container(stream)
        program = self.parser.parse_stream(stream, end_pos)

        if not program.keygroups:
            raise MissingRequiredChunkError("keygroup")

        logger.debug("Parsed program with %d keygroups", len(program.keygroups))
        return program

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file looks like an AKP program.

        Args:
            filepath: Path to check

        Returns:
            True if the file starts with RIFF....APRG
        """
        filepath = Path(filepath)

        if not filepath.exists():
            return False

        try:
            with open(filepath, "rb") as f:
                header = f.read(12)
        except OSError:
            return False

        return validate_akp_header(header)

    @classmethod
    def get_file_info(cls, filepath: Union[str, Path]) -> dict:
        """
        Get basic information about an AKP file without building a Program.

        Args:
            filepath: Path to .akp file

        Returns:
            Dictionary with file info
        """
        filepath = Path(filepath)

        with open(filepath, "rb") as f:
            data = f.read()

        info = {
            "valid": validate_akp_header(data),
            "size": len(data),
            "chunks": [],
        }

        if len(data) >= 12:
            info["riff"] = data[:4].decode("ascii", errors="replace")
            info["form"] = data[8:12].decode("ascii", errors="replace")

        if not info["valid"]:
            return info

        stream = io.BytesIO(data)
        stream.seek(12)
        try:
            while stream.tell() + CHUNK_HEADER_SIZE <= len(data):
                offset = stream.tell()
                chunk = read_chunk_header(stream)
                info["chunks"].append({"id": chunk.id, "offset": offset, "size": chunk.size})
                stream.seek(chunk.size, io.SEEK_CUR)
        except AkpError as e:
            info["error"] = str(e)

        return info


def parse(stream: BinaryIO) -> Program:
    """
    Parse an AKP program from a binary stream.

    Args:
        stream: Readable, seekable stream positioned at the file start

    Returns:
        Parsed Program
    """
    return AkpReader().parse_stream(stream)
