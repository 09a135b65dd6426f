"""
AKP to SFZ converter.

Renders a parsed Program as SFZ text, one <region> per keygroup.

AKP parameters are 0-100 positions; SFZ wants real units, so:
- level       -> volume in dB (-60..+6)
- env times   -> seconds on an exponential curve
- cutoff      -> Hz, 20 Hz - 20 kHz log sweep
- resonance   -> dB (0-40)
- LFO rate    -> Hz, 0.1 - 30 Hz log sweep
- mod amount  -> bipolar -1..+1 times a per-destination scale
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from akpconv.formats.akp.reader import AkpReader
from akpconv.models.keygroup import Keygroup
from akpconv.models.parameters import (
    Envelope,
    FilterType,
    Lfo,
    LfoWaveform,
    ModDestination,
    Modulation,
    ModSource,
)
from akpconv.models.program import Program
from akpconv.utils import scaling

logger = logging.getLogger(__name__)


class AkpToSfzConverter:
    """
    Converter from the AKP Program model to SFZ text.

    Example:
        program = AkpReader.read("piano.akp")
        sfz_text = AkpToSfzConverter().convert(program)
    """

    FILE_EXTENSION = "sfz"
    HEADER_COMMENT = "// Generated by akpconv"

    FILTER_TYPES = {
        FilterType.LOWPASS: "lpf_2p",
        FilterType.BANDPASS: "bpf_2p",
        FilterType.HIGHPASS: "hpf_2p",
    }
    DEFAULT_FILTER_TYPE = "lpf_2p"

    LFO_WAVEFORMS = {
        LfoWaveform.TRIANGLE: "triangle",
        LfoWaveform.SINE: "sine",
        LfoWaveform.SQUARE: "square",
        LfoWaveform.SAW: "saw",
        LfoWaveform.RAMP: "ramp",
        LfoWaveform.RANDOM: "random",
    }
    DEFAULT_WAVEFORM = "triangle"

    MOD_SOURCES = {
        ModSource.LFO1: "lfo1",
        ModSource.MOD_WHEEL: "modwheel",
        ModSource.AFTERTOUCH: "aftertouch",
        ModSource.KEY: "key",
        ModSource.KEY_GATE: "keygate",
        ModSource.VELOCITY: "vel",
        ModSource.LFO2: "lfo2",
        ModSource.PITCH_BEND: "pitchbend",
        ModSource.CHANNEL_PRESSURE: "chanpress",
        ModSource.POLY_PRESSURE: "polypress",
        ModSource.BREATH: "breath",
        ModSource.FOOT: "foot",
        ModSource.EXPRESSION: "expression",
    }

    # Destination opcode and the value a full +1 swing maps to
    MOD_DESTINATIONS: Dict[ModDestination, Tuple[str, float]] = {
        ModDestination.PITCH: ("pitch", 12.0),  # semitones
        ModDestination.CUTOFF: ("cutoff", 9600.0),  # cents
        ModDestination.RESONANCE: ("resonance", 40.0),  # dB
        ModDestination.VOLUME: ("volume", 60.0),  # dB
        ModDestination.PAN: ("pan", 100.0),
        ModDestination.LFO1_RATE: ("lfo1_freq", 20.0),  # Hz
        ModDestination.LFO2_RATE: ("lfo2_freq", 20.0),
        ModDestination.AMP_ATTACK: ("ampeg_attack", 10.0),  # seconds
        ModDestination.AMP_DECAY: ("ampeg_decay", 10.0),
        ModDestination.AMP_SUSTAIN: ("ampeg_sustain", 100.0),
        ModDestination.AMP_RELEASE: ("ampeg_release", 10.0),
        ModDestination.FILTER_ATTACK: ("fileg_attack", 10.0),
        ModDestination.FILTER_DECAY: ("fileg_decay", 10.0),
        ModDestination.FILTER_SUSTAIN: ("fileg_sustain", 100.0),
        ModDestination.FILTER_RELEASE: ("fileg_release", 10.0),
        ModDestination.AMP_LFO_DEPTH: ("amplfo_depth", 100.0),
        ModDestination.FILTER_LFO_DEPTH: ("fillfo_depth", 9600.0),  # cents
        ModDestination.PITCH_LFO_DEPTH: ("pitchlfo_depth", 1200.0),  # cents
    }

    # Emitted when a keygroup has no amp envelope
    FALLBACK_AMP_ENVELOPE = (
        "ampeg_attack=0.001",
        "ampeg_decay=0.1",
        "ampeg_sustain=100",
        "ampeg_release=0.3",
    )

    def convert(self, program: Program) -> str:
        """
        Render a Program as SFZ text.

        Args:
            program: Parsed program

        Returns:
            SFZ file contents
        """
        lines = [self.HEADER_COMMENT, ""]
        for keygroup in program.keygroups:
            lines.extend(self._region_lines(keygroup))
            lines.append("")
        return "\n".join(lines) + "\n"

    def convert_file(self, source_path: Union[str, Path]) -> str:
        """
        Read an AKP file and render it as SFZ text.

        Args:
            source_path: Path to .akp file

        Returns:
            SFZ file contents
        """
        return self.convert(AkpReader.read(source_path))

    def convert_and_save(
        self, source_path: Union[str, Path], output_path: Optional[Union[str, Path]] = None
    ) -> Path:
        """
        Convert an AKP file and write the SFZ next to it (or to output_path).

        Returns:
            Path of the written file
        """
        source_path = Path(source_path)
        output_path = Path(output_path) if output_path else source_path.with_suffix(".sfz")

        sfz_text = self.convert_file(source_path)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(sfz_text, encoding="utf-8")
        logger.info("Wrote %s", output_path)
        return output_path

    def _region_lines(self, keygroup: Keygroup) -> List[str]:
        lines = ["<region>"]

        if keygroup.sample is not None:
            path = keygroup.sample.filename.replace("\\", "/")
            lines.append(f"sample={path}")

        lines.append(f"lokey={keygroup.low_key}")
        lines.append(f"hikey={keygroup.high_key}")
        lines.append(f"lovel={keygroup.low_vel}")
        lines.append(f"hivel={keygroup.high_vel}")

        if keygroup.tune is not None:
            tune = keygroup.tune
            lines.append(f"volume={scaling.level_to_db(tune.level):.2f}")
            lines.append(f"tune={tune.semitone}")
            lines.append(f"fine_tune={tune.fine_tune}")
            lines.append("amp_veltrack=100")

        if keygroup.amp_env is not None:
            lines.extend(self._amp_envelope_lines(keygroup.amp_env))

        if keygroup.filter is not None and keygroup.filter.enabled:
            flt = keygroup.filter
            fil_type = self.FILTER_TYPES.get(FilterType.from_raw(flt.filter_type))
            lines.append(f"fil_type={fil_type or self.DEFAULT_FILTER_TYPE}")
            lines.append(f"cutoff={scaling.cutoff_to_hz(flt.cutoff):.1f}")
            lines.append(f"resonance={scaling.resonance_to_db(flt.resonance):.1f}")
            if keygroup.filter_env is not None:
                lines.append("fileg_depth=2400")  # 2 octaves

        if keygroup.filter_env is not None:
            lines.extend(self._filter_envelope_lines(keygroup.filter_env))

        for index, lfo in ((1, keygroup.lfo1), (2, keygroup.lfo2)):
            if lfo is not None:
                lines.extend(self._lfo_lines(index, lfo))

        for modulation in keygroup.mods:
            line = self._modulation_line(modulation)
            if line is not None:
                lines.append(line)

        if keygroup.sample is not None:
            lines.append("loop_mode=loop_continuous")
            lines.append("loop_start=0")
            lines.append("loop_end=0")

        lines.append("polyphony=64")
        lines.append("note_polyphony=1")
        lines.append("bend_up=200")
        lines.append("bend_down=-200")

        if keygroup.amp_env is None:
            lines.extend(self.FALLBACK_AMP_ENVELOPE)

        return lines

    def _amp_envelope_lines(self, env: Envelope) -> List[str]:
        attack = scaling.envelope_time(env.attack, scaling.AMP_ATTACK_CURVE, zero_value=0.0)
        decay = scaling.envelope_time(env.decay, scaling.AMP_DECAY_CURVE, zero_value=0.0)
        release = scaling.envelope_time(env.release, scaling.AMP_RELEASE_CURVE, zero_value=0.001)

        lines = [
            f"ampeg_attack={attack:.3f}",
            f"ampeg_decay={decay:.3f}",
            f"ampeg_sustain={env.sustain}",
            f"ampeg_release={release:.3f}",
        ]
        # Faster stages at high velocity
        if env.attack > 10:
            lines.append("ampeg_vel2attack=-20")
        if env.decay > 10:
            lines.append("ampeg_vel2decay=-10")
        return lines

    def _filter_envelope_lines(self, env: Envelope) -> List[str]:
        attack = scaling.envelope_time(env.attack, scaling.FILTER_ATTACK_CURVE)
        decay = scaling.envelope_time(env.decay, scaling.FILTER_DECAY_CURVE)
        release = scaling.envelope_time(env.release, scaling.FILTER_RELEASE_CURVE)
        return [
            f"fileg_attack={attack:.3f}",
            f"fileg_decay={decay:.3f}",
            f"fileg_sustain={env.sustain}",
            f"fileg_release={release:.3f}",
        ]

    def _lfo_lines(self, index: int, lfo: Lfo) -> List[str]:
        prefix = f"lfo{index}"
        waveform = self.LFO_WAVEFORMS.get(LfoWaveform.from_raw(lfo.waveform), self.DEFAULT_WAVEFORM)
        lines = [
            f"{prefix}_freq={scaling.lfo_rate_to_hz(lfo.rate):.2f}",
            f"{prefix}_wave={waveform}",
        ]
        if lfo.delay > 0:
            lines.append(f"{prefix}_delay={scaling.lfo_delay_seconds(lfo.delay):.2f}")
            lines.append(f"{prefix}_fade={scaling.lfo_fade_seconds(lfo.delay):.2f}")
        return lines

    def _modulation_line(self, modulation: Modulation) -> Optional[str]:
        """Render one routing, or None if source or destination is unmapped."""
        source = self.MOD_SOURCES.get(modulation.source_type)
        destination = self.MOD_DESTINATIONS.get(modulation.destination_type)
        if source is None or destination is None:
            logger.debug(
                "Dropping modulation %d -> %d (unmapped)",
                modulation.source,
                modulation.destination,
            )
            return None

        opcode, scale = destination
        amount = scaling.modulation_amount(modulation.amount, scale)
        return f"{source}_to_{opcode}={amount:.1f}"


def render_sfz(program: Program) -> str:
    """
    Render a Program as SFZ text.

    Args:
        program: Parsed program

    Returns:
        SFZ file contents
    """
    return AkpToSfzConverter().convert(program)


def convert_akp_to_sfz(
    source_path: Union[str, Path], output_path: Optional[Union[str, Path]] = None
) -> Path:
    """
    Convert an AKP file to SFZ.

    Example:
        convert_akp_to_sfz("piano.akp", "piano.sfz")
    """
    return AkpToSfzConverter().convert_and_save(source_path, output_path)
