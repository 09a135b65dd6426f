"""
RIFF chunk reading for AKP files.

AKP Container Layout (little-endian):
    Offset  Size    Description
    0x00    4       "RIFF"
    0x04    4       Overall size (not used)
    0x08    4       "APRG"
    0x0C    ...     Chunks

Each chunk is a 4-byte ASCII tag (null padded), a 4-byte unsigned
payload length and then the payload itself.
"""

import io
import struct
from dataclasses import dataclass
from typing import BinaryIO

from akpconv.utils.validation import (
    CorruptedChunkError,
    InvalidAprgSignatureError,
    InvalidRiffHeaderError,
    TruncatedDataError,
)

RIFF_SIGNATURE = b"RIFF"
APRG_SIGNATURE = b"APRG"
CHUNK_HEADER_SIZE = 8


@dataclass(frozen=True)
class ChunkHeader:
    """
    Chunk tag and payload size.

    Attributes:
        id: Tag with trailing null bytes removed ("prg ", "kgrp", ...)
        size: Payload length in bytes
    """

    id: str
    size: int


def read_exact(stream: BinaryIO, size: int) -> bytes:
    """
    Read exactly size bytes.

    Args:
        stream: Binary stream
        size: Number of bytes wanted

    Returns:
        The bytes read

    Raises:
        TruncatedDataError: If the stream ends first
    """
    data = stream.read(size)
    if len(data) < size:
        raise TruncatedDataError(
            f"Unexpected end of file: wanted {size} bytes, got {len(data)}"
        )
    return data


def read_chunk_header(stream: BinaryIO) -> ChunkHeader:
    """
    Read a chunk header at the current position.

    Advances the stream by exactly 8 bytes.

    Args:
        stream: Binary stream positioned on a chunk boundary

    Returns:
        Parsed ChunkHeader
    """
    raw = read_exact(stream, CHUNK_HEADER_SIZE)
    chunk_id = raw[:4].decode("utf-8", errors="replace").rstrip("\x00")
    (size,) = struct.unpack("<I", raw[4:])
    return ChunkHeader(chunk_id, size)


def validate_container(stream: BinaryIO) -> None:
    """
    Check the RIFF/APRG envelope.

    Leaves the stream positioned on the first chunk.

    Args:
        stream: Binary stream positioned at offset 0

    Raises:
        InvalidRiffHeaderError: Not a RIFF file
        InvalidAprgSignatureError: RIFF file, but not an Akai program
    """
    signature = stream.read(4)
    if len(signature) < 4:
        raise CorruptedChunkError("RIFF", "Failed to read RIFF signature")
    if signature != RIFF_SIGNATURE:
        raise InvalidRiffHeaderError()

    # Overall size, not needed
    stream.seek(4, io.SEEK_CUR)

    signature = stream.read(4)
    if len(signature) < 4:
        raise CorruptedChunkError("APRG", "Failed to read APRG signature")
    if signature != APRG_SIGNATURE:
        raise InvalidAprgSignatureError()
