"""
AKP chunk parser.

Walks the chunks of an Akai program file and builds the Program model.

Top-level chunks:
    "prg "  Program header (min 3 bytes)
    "kgrp"  Keygroup, containing nested chunks (min 1 byte)

Keygroup sub-chunks (fixed offsets inside the payload):
    Tag     Min     Fields
    "zone"  5       1:low_key 2:high_key 3:low_vel 4:high_vel
    "smpl"  3       2..: null-terminated sample filename
    "tune"  5       2:level 3:semitone(s8) 4:fine_tune(s8)
    "filt"  8       2:cutoff 3:resonance 7:filter_type
    "env "  6       2:attack 3:decay 4:sustain 5:release
    "lfo "  9       5:waveform 6:rate 7:delay 8:depth
    "mods"  4       1:source 2:destination 3:amount

Any other tag is skipped at both levels.
"""

import io
import logging
import struct
from typing import Any, BinaryIO, Dict, List, Optional, Sequence, Tuple

from akpconv.formats.akp.riff import read_chunk_header, read_exact
from akpconv.models.keygroup import Keygroup
from akpconv.models.parameters import Envelope, Filter, Lfo, Modulation, Sample, Tune
from akpconv.models.program import Program, ProgramHeader
from akpconv.utils.validation import (
    CorruptedChunkError,
    InvalidKeyRangeError,
    InvalidParameterValueError,
    InvalidVelocityRangeError,
    validate_chunk_size,
    validate_midi_value,
    validate_range,
)

logger = logging.getLogger(__name__)

# Minimum payload size per chunk tag
MIN_CHUNK_SIZES = {
    "prg ": 3,
    "kgrp": 1,
    "zone": 5,
    "smpl": 3,
    "tune": 5,
    "filt": 8,
    "env ": 6,
    "lfo ": 9,
    "mods": 4,
}

MAX_FILTER_TYPE = 3


class SlotAccumulator:
    """
    Assigns repeated chunks to named slots in arrival order.

    The first item goes to the first slot, the second to the second and
    so on. Items beyond the last slot are counted but not kept.

    Example:
        envelopes = SlotAccumulator(("amp_env", "filter_env", "aux_env"))
        envelopes.add(env)  # -> "amp_env"
    """

    def __init__(self, names: Sequence[str]):
        self.names = tuple(names)
        self.slots: Dict[str, Any] = {}
        self.count = 0

    def add(self, item: Any) -> Optional[str]:
        """
        Store item in the next free slot.

        Returns:
            Slot name, or None if all slots were already taken
        """
        index = self.count
        self.count += 1
        if index >= len(self.names):
            return None
        name = self.names[index]
        self.slots[name] = item
        return name

    @property
    def overflow(self) -> int:
        return max(0, self.count - len(self.names))


def parse_program_header(data: bytes) -> ProgramHeader:
    """
    Parse a 'prg ' payload.

    Byte 0 is reserved; byte 1 is the MIDI program number, byte 2 the
    keygroup count.
    """
    validate_chunk_size("prg ", len(data), MIN_CHUNK_SIZES["prg "])
    return ProgramHeader(midi_program_number=data[1], number_of_keygroups=data[2])


def parse_zone_chunk(data: bytes) -> Tuple[int, int, int, int]:
    """
    Parse a 'zone' payload.

    Args:
        data: Chunk payload

    Returns:
        (low_key, high_key, low_vel, high_vel)

    Raises:
        InvalidKeyRangeError: low_key > high_key
        InvalidVelocityRangeError: low_vel > high_vel
        InvalidParameterValueError: high_key or high_vel above 127
    """
    validate_chunk_size("zone", len(data), MIN_CHUNK_SIZES["zone"])
    low_key, high_key, low_vel, high_vel = data[1:5]

    validate_range(low_key, high_key, InvalidKeyRangeError)
    validate_range(low_vel, high_vel, InvalidVelocityRangeError)
    validate_midi_value(high_key, "high_key")
    validate_midi_value(high_vel, "high_vel")

    return low_key, high_key, low_vel, high_vel


def parse_smpl_chunk(data: bytes) -> Sample:
    """Parse a 'smpl' payload; the filename runs from byte 2 to the first null."""
    validate_chunk_size("smpl", len(data), MIN_CHUNK_SIZES["smpl"])
    raw_name = data[2:].split(b"\x00", 1)[0]
    filename = raw_name.decode("utf-8", errors="replace")

    if not filename:
        raise CorruptedChunkError("smpl", "Empty sample filename")

    return Sample(filename=filename)


def parse_tune_chunk(data: bytes) -> Tune:
    """Parse a 'tune' payload."""
    validate_chunk_size("tune", len(data), MIN_CHUNK_SIZES["tune"])
    level = data[2]
    semitone, fine_tune = struct.unpack_from("<bb", data, 3)
    return Tune(level=level, semitone=semitone, fine_tune=fine_tune)


def parse_filt_chunk(data: bytes) -> Filter:
    """Parse a 'filt' payload."""
    validate_chunk_size("filt", len(data), MIN_CHUNK_SIZES["filt"])
    cutoff = data[2]
    resonance = data[3]
    filter_type = data[7]

    if filter_type > MAX_FILTER_TYPE:
        raise InvalidParameterValueError("filter_type", filter_type)

    return Filter(cutoff=cutoff, resonance=resonance, filter_type=filter_type)


def parse_env_chunk(data: bytes) -> Envelope:
    """Parse an 'env ' payload."""
    validate_chunk_size("env ", len(data), MIN_CHUNK_SIZES["env "])
    attack, decay, sustain, release = data[2:6]
    return Envelope(attack=attack, decay=decay, sustain=sustain, release=release)


def parse_lfo_chunk(data: bytes) -> Lfo:
    """Parse an 'lfo ' payload."""
    validate_chunk_size("lfo ", len(data), MIN_CHUNK_SIZES["lfo "])
    waveform, rate, delay, depth = data[5:9]
    return Lfo(waveform=waveform, rate=rate, delay=delay, depth=depth)


def parse_mods_chunk(data: bytes) -> Modulation:
    """Parse a 'mods' payload."""
    validate_chunk_size("mods", len(data), MIN_CHUNK_SIZES["mods"])
    source, destination, amount = data[1:4]
    return Modulation(source=source, destination=destination, amount=amount)


class AkpParser:
    """
    Chunk walker for AKP program files.

    Expects a stream already past the RIFF/APRG envelope (see
    riff.validate_container).

    Example:
        with open("piano.akp", "rb") as f:
            validate_container(f)
            program = AkpParser().parse_stream(f, end_pos)
    """

    PROGRAM_CHUNK = "prg "
    KEYGROUP_CHUNK = "kgrp"

    ENVELOPE_SLOTS = ("amp_env", "filter_env", "aux_env")
    LFO_SLOTS = ("lfo1", "lfo2")

    def __init__(self):
        self.header: Optional[ProgramHeader] = None
        self.keygroups: List[Keygroup] = []
        self.skipped_chunks: List[Tuple[str, int, int]] = []

    def parse_stream(self, stream: BinaryIO, end_pos: int) -> Program:
        """
        Parse top-level chunks until end_pos.

        Args:
            stream: Seekable binary stream positioned on the first chunk
            end_pos: Absolute offset where the chunk data ends

        Returns:
            Parsed Program
        """
        self.header = None
        self.keygroups = []
        self.skipped_chunks = []

        while stream.tell() < end_pos:
            offset = stream.tell()
            chunk = read_chunk_header(stream)

            if chunk.id == self.PROGRAM_CHUNK:
                validate_chunk_size(chunk.id, chunk.size, MIN_CHUNK_SIZES[chunk.id])
                data = read_exact(stream, chunk.size)
                self.header = parse_program_header(data)

            elif chunk.id == self.KEYGROUP_CHUNK:
                validate_chunk_size(chunk.id, chunk.size, MIN_CHUNK_SIZES[chunk.id])
                kgrp_end = stream.tell() + chunk.size
                logger.debug("Parsing keygroup %d at 0x%X", len(self.keygroups) + 1, offset)
                self.keygroups.append(self._parse_keygroup(stream, kgrp_end))

            else:
                logger.warning("Skipping unknown chunk type '%s' at 0x%X", chunk.id, offset)
                self.skipped_chunks.append((chunk.id, offset, chunk.size))
                stream.seek(chunk.size, io.SEEK_CUR)

        return Program(header=self.header, keygroups=tuple(self.keygroups))

    def _parse_keygroup(self, stream: BinaryIO, end_pos: int) -> Keygroup:
        """
        Parse the sub-chunks of one keygroup.

        Args:
            stream: Stream positioned on the first sub-chunk
            end_pos: Offset where the keygroup payload ends

        Returns:
            Keygroup built from the sub-chunks
        """
        fields: Dict[str, Any] = {}
        envelopes = SlotAccumulator(self.ENVELOPE_SLOTS)
        lfos = SlotAccumulator(self.LFO_SLOTS)
        mods: List[Modulation] = []

        while stream.tell() < end_pos:
            offset = stream.tell()
            chunk = read_chunk_header(stream)
            data = read_exact(stream, chunk.size)

            if chunk.id == "zone":
                zone = parse_zone_chunk(data)
                fields.update(zip(("low_key", "high_key", "low_vel", "high_vel"), zone))
            elif chunk.id == "smpl":
                fields["sample"] = parse_smpl_chunk(data)
            elif chunk.id == "tune":
                fields["tune"] = parse_tune_chunk(data)
            elif chunk.id == "filt":
                fields["filter"] = parse_filt_chunk(data)
            elif chunk.id == "env ":
                if envelopes.add(parse_env_chunk(data)) is None:
                    logger.debug(
                        "Discarding extra envelope (%d over) at 0x%X", envelopes.overflow, offset
                    )
            elif chunk.id == "lfo ":
                if lfos.add(parse_lfo_chunk(data)) is None:
                    logger.debug("Discarding extra LFO (%d over) at 0x%X", lfos.overflow, offset)
            elif chunk.id == "mods":
                mods.append(parse_mods_chunk(data))
            else:
                logger.debug("Skipping unknown keygroup chunk type '%s' at 0x%X", chunk.id, offset)
                self.skipped_chunks.append((chunk.id, offset, chunk.size))

        fields.update(envelopes.slots)
        fields.update(lfos.slots)
        return Keygroup(mods=tuple(mods), **fields)
