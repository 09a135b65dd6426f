"""
AKP to Decent Sampler converter.

Renders a parsed Program as a .dspreset XML document:
- ui          Six fixed knobs (ADSR, filter cutoff/resonance)
- groups      One group per keygroup with its sample
- effects     Lowpass (if any keygroup has a filter) and a reverb
- midi        Fixed CC bindings
- modulators  One LFO per keygroup with an lfo1 (only if any LFO exists)
- tags        Conversion metadata

Envelope floors differ from the SFZ output on purpose: Decent Sampler gets
0.1 s for a zero decay/release instead of 0 s.
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Union

from akpconv import __version__
from akpconv.formats.akp.reader import AkpReader
from akpconv.models.keygroup import Keygroup
from akpconv.models.parameters import LfoWaveform
from akpconv.models.program import Program
from akpconv.utils import scaling

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


class AkpToDecentSamplerConverter:
    """
    Converter from the AKP Program model to Decent Sampler XML.

    Example:
        program = AkpReader.read("piano.akp")
        xml_text = AkpToDecentSamplerConverter().convert(program)
    """

    FILE_EXTENSION = "dspreset"
    MIN_VERSION = "1.0.0"

    # (parameterName, label, minValue, maxValue, value)
    KNOBS = (
        ("ATTACK", "Attack", "0", "5", "0.1"),
        ("DECAY", "Decay", "0", "5", "0.5"),
        ("SUSTAIN", "Sustain", "0", "1", "0.7"),
        ("RELEASE", "Release", "0", "10", "0.3"),
        ("FILTER_CUTOFF", "Filter", "20", "20000", "20000"),
        ("FILTER_RESONANCE", "Resonance", "0", "40", "0"),
    )
    KNOB_X_START = 10
    KNOB_X_STEP = 100
    KNOB_Y = 20
    KNOB_TEXT_COLOR = "AA000000"

    REVERB = {
        "roomSize": "0.5",
        "damping": "0.5",
        "wetLevel": "0.3",
        "dryLevel": "0.7",
        "width": "1.0",
    }

    # (CC number, parameter)
    MIDI_BINDINGS = (
        ("1", "FILTER_CUTOFF"),
        ("2", "FILTER_RESONANCE"),
        ("7", "MAIN_VOLUME"),
    )

    LFO_WAVEFORMS = {
        LfoWaveform.TRIANGLE: "triangle",
        LfoWaveform.SINE: "sine",
        LfoWaveform.SQUARE: "square",
        LfoWaveform.SAW: "saw",
        LfoWaveform.RAMP: "ramp",
        LfoWaveform.RANDOM: "random",
    }
    DEFAULT_WAVEFORM = "sine"

    # Zero-position values for the amp envelope
    ATTACK_FLOOR = 0.001
    DECAY_FLOOR = 0.1
    RELEASE_FLOOR = 0.1

    def convert(self, program: Program) -> str:
        """
        Render a Program as a .dspreset document.

        Args:
            program: Parsed program

        Returns:
            XML text including the declaration
        """
        root = ET.Element("DecentSampler", {"minVersion": self.MIN_VERSION})

        self._add_ui(root)

        groups = ET.SubElement(root, "groups")
        for index, keygroup in enumerate(program.keygroups, start=1):
            self._add_group(groups, index, keygroup)

        effects = ET.SubElement(root, "effects")
        if program.has_filter:
            ET.SubElement(
                effects,
                "lowpass",
                {"frequency": "FILTER_CUTOFF", "resonance": "FILTER_RESONANCE"},
            )
        ET.SubElement(effects, "reverb", self.REVERB)

        midi = ET.SubElement(root, "midi")
        midi.append(ET.Comment(" MIDI CC bindings can be added here "))
        for number, parameter in self.MIDI_BINDINGS:
            ET.SubElement(midi, "cc", {"number": number, "parameter": parameter})

        if program.has_lfo:
            self._add_modulators(root, program)

        tags = ET.SubElement(root, "tags")
        ET.SubElement(tags, "tag", {"name": "author", "value": "akpconv"})
        ET.SubElement(tags, "tag", {"name": "description", "value": "Converted from AKP format"})
        ET.SubElement(
            tags, "tag", {"name": "conversion-tool", "value": f"akpconv v{__version__}"}
        )

        ET.indent(root, space="  ")
        return XML_DECLARATION + "\n" + ET.tostring(root, encoding="unicode") + "\n"

    def convert_file(self, source_path: Union[str, Path]) -> str:
        """
        Read an AKP file and render it as a .dspreset document.

        Args:
            source_path: Path to .akp file

        Returns:
            XML text
        """
        return self.convert(AkpReader.read(source_path))

    def convert_and_save(
        self, source_path: Union[str, Path], output_path: Optional[Union[str, Path]] = None
    ) -> Path:
        """
        Convert an AKP file and write the preset next to it (or to output_path).

        Returns:
            Path of the written file
        """
        source_path = Path(source_path)
        output_path = Path(output_path) if output_path else source_path.with_suffix(".dspreset")

        xml_text = self.convert_file(source_path)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(xml_text, encoding="utf-8")
        logger.info("Wrote %s", output_path)
        return output_path

    def _add_ui(self, root: ET.Element) -> None:
        ui = ET.SubElement(root, "ui")
        tab = ET.SubElement(ui, "tab", {"name": "Main"})

        for position, (parameter, label, min_value, max_value, value) in enumerate(self.KNOBS):
            knob = ET.SubElement(
                tab,
                "labeled-knob",
                {
                    "x": str(self.KNOB_X_START + position * self.KNOB_X_STEP),
                    "y": str(self.KNOB_Y),
                    "width": "90",
                    "height": "100",
                    "parameterName": parameter,
                    "type": "float",
                    "minValue": min_value,
                    "maxValue": max_value,
                    "value": value,
                    "textColor": self.KNOB_TEXT_COLOR,
                },
            )
            ET.SubElement(
                knob,
                "label",
                {"text": label, "x": "0", "y": "80", "width": "90", "height": "30"},
            )

    def _add_group(self, groups: ET.Element, index: int, keygroup: Keygroup) -> None:
        group = ET.SubElement(groups, "group", {"name": f"Group{index}"})

        env = keygroup.amp_env
        if env is not None:
            attack = scaling.envelope_time(
                env.attack, scaling.AMP_ATTACK_CURVE, zero_value=self.ATTACK_FLOOR
            )
            decay = scaling.envelope_time(
                env.decay, scaling.AMP_DECAY_CURVE, zero_value=self.DECAY_FLOOR
            )
            release = scaling.envelope_time(
                env.release, scaling.AMP_RELEASE_CURVE, zero_value=self.RELEASE_FLOOR
            )
            group.set("attack", f"{attack:.3f}")
            group.set("decay", f"{decay:.3f}")
            group.set("sustain", f"{scaling.sustain_fraction(env.sustain):.3f}")
            group.set("release", f"{release:.3f}")

        tune = keygroup.tune
        if tune is not None:
            group.set("volume", f"{scaling.level_to_db(tune.level):.2f}")

        if keygroup.sample is None:
            return

        sample = ET.SubElement(
            group,
            "sample",
            {
                "path": keygroup.sample.filename,
                "loNote": str(keygroup.low_key),
                "hiNote": str(keygroup.high_key),
                "loVel": str(keygroup.low_vel),
                "hiVel": str(keygroup.high_vel),
            },
        )
        if tune is not None:
            if tune.semitone != 0:
                sample.set("tuning", str(tune.semitone))
            if tune.fine_tune != 0:
                sample.set("fineTuning", str(tune.fine_tune))

    def _add_modulators(self, root: ET.Element, program: Program) -> None:
        modulators = ET.SubElement(root, "modulators")

        # lfo2 only counts towards emitting the block
        for keygroup in program.keygroups:
            lfo = keygroup.lfo1
            if lfo is None:
                continue
            waveform = self.LFO_WAVEFORMS.get(
                LfoWaveform.from_raw(lfo.waveform), self.DEFAULT_WAVEFORM
            )
            ET.SubElement(
                modulators,
                "lfo",
                {
                    "frequency": f"{scaling.lfo_rate_to_hz(lfo.rate):.2f}",
                    "waveform": waveform,
                    "target": "FILTER_CUTOFF",
                    "amount": "0.3",
                },
            )


def render_dspreset(program: Program) -> str:
    """
    Render a Program as a Decent Sampler preset.

    Args:
        program: Parsed program

    Returns:
        XML text
    """
    return AkpToDecentSamplerConverter().convert(program)


def convert_akp_to_dspreset(
    source_path: Union[str, Path], output_path: Optional[Union[str, Path]] = None
) -> Path:
    """
    Convert an AKP file to a Decent Sampler preset.

    Example:
        convert_akp_to_dspreset("piano.akp", "piano.dspreset")
    """
    return AkpToDecentSamplerConverter().convert_and_save(source_path, output_path)
