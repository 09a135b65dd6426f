"""Test configuration and fixtures."""

import struct

import pytest

from akpconv.models.keygroup import Keygroup
from akpconv.models.parameters import Envelope, Filter, Lfo, Modulation, Sample, Tune
from akpconv.models.program import Program, ProgramHeader


def make_chunk(chunk_id: bytes, data: bytes) -> bytes:
    """Build a chunk: 4-byte tag, little-endian size, payload."""
    assert len(chunk_id) == 4
    return chunk_id + struct.pack("<I", len(data)) + data


def make_akp(*chunks: bytes, form: bytes = b"APRG", riff: bytes = b"RIFF") -> bytes:
    """Wrap chunks in the RIFF/APRG envelope."""
    body = b"".join(chunks)
    return riff + struct.pack("<I", len(body) + 4) + form + body


def zone_chunk(low_key=0, high_key=127, low_vel=0, high_vel=127) -> bytes:
    return make_chunk(b"zone", bytes([0, low_key, high_key, low_vel, high_vel]))


def smpl_chunk(filename: str) -> bytes:
    return make_chunk(b"smpl", b"\x00\x00" + filename.encode("utf-8") + b"\x00")


def tune_chunk(level=100, semitone=0, fine_tune=0) -> bytes:
    return make_chunk(b"tune", struct.pack("<BBBbb", 0, 0, level, semitone, fine_tune))


def filt_chunk(cutoff=100, resonance=0, filter_type=1) -> bytes:
    return make_chunk(b"filt", bytes([0, 0, cutoff, resonance, 0, 0, 0, filter_type]))


def env_chunk(attack=0, decay=50, sustain=100, release=20) -> bytes:
    return make_chunk(b"env ", bytes([0, 0, attack, decay, sustain, release]))


def lfo_chunk(waveform=1, rate=50, delay=0, depth=0) -> bytes:
    return make_chunk(b"lfo ", bytes([0, 0, 0, 0, 0, waveform, rate, delay, depth]))


def mods_chunk(source=0, destination=0, amount=50) -> bytes:
    return make_chunk(b"mods", bytes([0, source, destination, amount]))


def kgrp_chunk(*sub_chunks: bytes) -> bytes:
    return make_chunk(b"kgrp", b"".join(sub_chunks))


def prg_chunk(program_number=0, keygroups=1) -> bytes:
    return make_chunk(b"prg ", bytes([0, program_number, keygroups]))


@pytest.fixture
def basic_akp_data():
    """Two keygroups with the common sub-chunks."""
    return make_akp(
        prg_chunk(program_number=5, keygroups=2),
        kgrp_chunk(
            zone_chunk(36, 60, 0, 127),
            smpl_chunk("PIANO\\LOW.WAV"),
            tune_chunk(level=75, semitone=-12, fine_tune=25),
            filt_chunk(cutoff=50, resonance=25, filter_type=1),
            env_chunk(attack=20, decay=40, sustain=80, release=60),
            env_chunk(attack=10, decay=10, sustain=50, release=10),
            lfo_chunk(waveform=1, rate=30, delay=0, depth=50),
            mods_chunk(source=1, destination=0, amount=75),
        ),
        kgrp_chunk(
            zone_chunk(61, 96, 0, 127),
            smpl_chunk("PIANO\\HIGH.WAV"),
        ),
    )


@pytest.fixture
def akp_file(tmp_path, basic_akp_data):
    """Write the basic program to disk."""
    path = tmp_path / "piano.akp"
    path.write_bytes(basic_akp_data)
    return path


@pytest.fixture
def full_keygroup():
    """A keygroup with every block present."""
    return Keygroup(
        low_key=60,
        high_key=72,
        low_vel=1,
        high_vel=127,
        sample=Sample(filename="Strings\\Violin C4.wav"),
        tune=Tune(level=75, semitone=-12, fine_tune=25),
        filter=Filter(cutoff=50, resonance=25, filter_type=1),
        amp_env=Envelope(attack=20, decay=40, sustain=80, release=60),
        filter_env=Envelope(attack=0, decay=0, sustain=50, release=0),
        lfo1=Lfo(waveform=2, rate=0, delay=50, depth=50),
        lfo2=Lfo(waveform=9, rate=100, delay=0, depth=0),
        mods=(
            Modulation(source=1, destination=0, amount=75),
            Modulation(source=99, destination=0, amount=75),
            Modulation(source=5, destination=3, amount=0),
        ),
    )


@pytest.fixture
def full_program(full_keygroup):
    return Program(
        header=ProgramHeader(midi_program_number=1, number_of_keygroups=2),
        keygroups=(full_keygroup, Keygroup(low_key=73, high_key=96, low_vel=0, high_vel=127)),
    )
