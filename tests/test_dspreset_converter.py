"""Tests for the AKP to Decent Sampler converter."""

import sys
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from akpconv import __version__, render_dspreset
from akpconv.converters.akp_to_dspreset import convert_akp_to_dspreset
from akpconv.models.keygroup import Keygroup
from akpconv.models.parameters import Envelope, Filter, Lfo, Sample, Tune
from akpconv.models.program import Program


def render_tree(program: Program) -> ET.Element:
    return ET.fromstring(render_dspreset(program).encode("utf-8"))


class TestDocument:
    """Test cases for the document skeleton."""

    def test_declaration_and_root(self, full_program):
        text = render_dspreset(full_program)

        assert text.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<DecentSampler')
        assert render_tree(full_program).get("minVersion") == "1.0.0"

    def test_section_order(self, full_program):
        """Test top-level children appear in document order."""
        root = render_tree(full_program)

        assert [child.tag for child in root] == [
            "ui",
            "groups",
            "effects",
            "midi",
            "modulators",
            "tags",
        ]

    def test_knobs(self):
        """Test six knobs laid out left to right."""
        root = render_tree(Program())
        knobs = root.findall("./ui/tab/labeled-knob")

        assert root.find("./ui/tab").get("name") == "Main"
        assert [knob.get("parameterName") for knob in knobs] == [
            "ATTACK",
            "DECAY",
            "SUSTAIN",
            "RELEASE",
            "FILTER_CUTOFF",
            "FILTER_RESONANCE",
        ]
        assert [knob.get("x") for knob in knobs] == ["10", "110", "210", "310", "410", "510"]
        assert all(knob.get("y") == "20" for knob in knobs)
        assert knobs[4].get("maxValue") == "20000"
        assert knobs[0].find("label").get("text") == "Attack"

    def test_midi_bindings(self, full_program):
        ccs = render_tree(full_program).findall("./midi/cc")

        assert [(cc.get("number"), cc.get("parameter")) for cc in ccs] == [
            ("1", "FILTER_CUTOFF"),
            ("2", "FILTER_RESONANCE"),
            ("7", "MAIN_VOLUME"),
        ]

    def test_midi_comment(self, full_program):
        assert "<!-- MIDI CC bindings can be added here -->" in render_dspreset(full_program)

    def test_tags(self, full_program):
        tags = {
            tag.get("name"): tag.get("value")
            for tag in render_tree(full_program).findall("./tags/tag")
        }

        assert tags == {
            "author": "akpconv",
            "description": "Converted from AKP format",
            "conversion-tool": f"akpconv v{__version__}",
        }

    def test_idempotent(self, full_program):
        assert render_dspreset(full_program) == render_dspreset(full_program)


class TestGroups:
    """Test cases for group and sample elements."""

    def test_group_count_and_names(self, full_program):
        groups = render_tree(full_program).findall("./groups/group")

        assert len(groups) == len(full_program.keygroups)
        assert [group.get("name") for group in groups] == ["Group1", "Group2"]

    def test_full_group(self, full_program):
        group = render_tree(full_program).find("./groups/group")

        assert group.get("attack") == "0.002"
        assert group.get("decay") == "0.005"
        assert group.get("sustain") == "0.800"
        assert group.get("release") == "0.020"
        assert group.get("volume") == "-10.50"

    def test_sample(self, full_program):
        sample = render_tree(full_program).find("./groups/group/sample")

        assert sample.get("path") == "Strings\\Violin C4.wav"
        assert sample.get("loNote") == "60"
        assert sample.get("hiNote") == "72"
        assert sample.get("loVel") == "1"
        assert sample.get("hiVel") == "127"
        assert sample.get("tuning") == "-12"
        assert sample.get("fineTuning") == "25"

    def test_zero_tuning_omitted(self):
        program = Program(keygroups=(Keygroup(sample=Sample("a.wav"), tune=Tune(level=100)),))
        sample = render_tree(program).find("./groups/group/sample")

        assert sample.get("tuning") is None
        assert sample.get("fineTuning") is None

    def test_no_sample(self, full_program):
        """Test a keygroup without sample gives an empty group."""
        group = render_tree(full_program).findall("./groups/group")[1]

        assert group.find("sample") is None
        assert group.get("attack") is None
        assert group.get("volume") is None

    def test_zero_envelope_floors(self):
        program = Program(keygroups=(Keygroup(amp_env=Envelope()),))
        group = render_tree(program).find("./groups/group")

        assert group.get("attack") == "0.001"
        assert group.get("decay") == "0.100"
        assert group.get("sustain") == "0.000"
        assert group.get("release") == "0.100"

    def test_sample_path_escaped(self):
        """Test XML special characters survive a round trip through a parser."""
        program = Program(keygroups=(Keygroup(sample=Sample('Drums & "Perc" <1>.wav')),))

        text = render_dspreset(program)
        sample = ET.fromstring(text.encode("utf-8")).find("./groups/group/sample")

        assert "&amp;" in text
        assert sample.get("path") == 'Drums & "Perc" <1>.wav'


class TestEffects:
    """Test cases for the effects section."""

    def test_lowpass_with_filter(self, full_program):
        effects = render_tree(full_program).find("effects")

        assert [child.tag for child in effects] == ["lowpass", "reverb"]
        assert effects.find("lowpass").get("frequency") == "FILTER_CUTOFF"

    def test_lowpass_for_disabled_filter(self):
        """Test any filter chunk enables the lowpass, even type off."""
        program = Program(keygroups=(Keygroup(filter=Filter(filter_type=0)),))

        assert render_tree(program).find("./effects/lowpass") is not None

    def test_reverb_only(self):
        effects = render_tree(Program(keygroups=(Keygroup(),))).find("effects")

        assert [child.tag for child in effects] == ["reverb"]
        assert effects.find("reverb").get("roomSize") == "0.5"
        assert effects.find("reverb").get("dryLevel") == "0.7"


class TestModulators:
    """Test cases for the modulators section."""

    def test_lfo1_emitted(self, full_program):
        lfos = render_tree(full_program).findall("./modulators/lfo")

        assert len(lfos) == 1
        assert lfos[0].get("frequency") == "0.10"
        assert lfos[0].get("waveform") == "square"
        assert lfos[0].get("target") == "FILTER_CUTOFF"
        assert lfos[0].get("amount") == "0.3"

    def test_lfo2_only(self):
        """Test an lfo2-only program gets an empty modulators element."""
        program = Program(keygroups=(Keygroup(lfo2=Lfo(waveform=1, rate=50)),))
        modulators = render_tree(program).find("modulators")

        assert modulators is not None
        assert len(modulators) == 0

    def test_no_lfo(self):
        program = Program(keygroups=(Keygroup(sample=Sample("a.wav")),))

        assert render_tree(program).find("modulators") is None

    @pytest.mark.parametrize("waveform,expected", [(0, "triangle"), (5, "random"), (6, "sine")])
    def test_waveform_fallback(self, waveform, expected):
        program = Program(keygroups=(Keygroup(lfo1=Lfo(waveform=waveform, rate=100)),))
        lfo = render_tree(program).find("./modulators/lfo")

        assert lfo.get("waveform") == expected
        assert lfo.get("frequency") == "30.00"


class TestDspresetFiles:
    """Test cases for file conversion."""

    def test_convert_and_save(self, akp_file):
        output = convert_akp_to_dspreset(akp_file)

        assert output == akp_file.with_suffix(".dspreset")
        root = ET.parse(output).getroot()
        assert root.tag == "DecentSampler"
        assert len(root.findall("./groups/group")) == 2
        assert root.find("./groups/group/sample").get("path") == "PIANO\\LOW.WAV"
        assert root.find("./modulators/lfo").get("waveform") == "sine"
