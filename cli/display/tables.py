"""
Rich table displays for parsed AKP programs.
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from akpconv.models.keygroup import Keygroup
from akpconv.models.parameters import FilterType, LfoWaveform, ModDestination, ModSource
from akpconv.models.program import Program
from akpconv.utils import scaling

console = Console()

NOTE_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]


def note_name(note: int) -> str:
    """Convert MIDI note number to name (C-1 = 0)."""
    return f"{NOTE_NAMES[note % 12]}{note // 12 - 1}"


def enum_label(enum_cls, value: int) -> str:
    """Member name of a raw value, or a marker for unmapped values."""
    member = enum_cls.from_raw(value)
    if member is None:
        return f"[dim]unknown ({value})[/dim]"
    return member.name.lower()


def display_program_info(program: Program, filepath: str = "") -> None:
    """Display a parsed program with Rich formatting."""
    header = program.header
    header_content = f"""[bold]File:[/bold] {filepath or "N/A"}
[bold]MIDI Program:[/bold] {header.midi_program_number if header else "N/A"}
[bold]Keygroups (header):[/bold] {header.number_of_keygroups if header else "N/A"}
[bold]Keygroups (parsed):[/bold] {len(program.keygroups)}
[bold]Filter:[/bold] {"yes" if program.has_filter else "no"}
[bold]LFO:[/bold] {"yes" if program.has_lfo else "no"}"""

    console.print(
        Panel(
            header_content,
            title="[bold blue]AKP Program Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )

    table = Table(title="Keygroups", box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=3)
    table.add_column("Keys", width=12)
    table.add_column("Vel", width=8)
    table.add_column("Sample", style="cyan")
    table.add_column("Level", width=9)
    table.add_column("Tune", width=8)
    table.add_column("Filter", width=20)
    table.add_column("Env", width=4)
    table.add_column("LFO", width=4)
    table.add_column("Mods", width=5)

    for index, kg in enumerate(program.keygroups, start=1):
        table.add_row(
            str(index),
            f"{note_name(kg.low_key)}-{note_name(kg.high_key)}",
            f"{kg.low_vel}-{kg.high_vel}",
            kg.sample.filename if kg.sample else "[dim]-[/dim]",
            f"{scaling.level_to_db(kg.tune.level):.1f} dB" if kg.tune else "-",
            f"{kg.tune.semitone:+d}/{kg.tune.fine_tune:+d}" if kg.tune else "-",
            _filter_summary(kg),
            str(sum(e is not None for e in (kg.amp_env, kg.filter_env, kg.aux_env))),
            str(sum(lfo is not None for lfo in (kg.lfo1, kg.lfo2))),
            str(len(kg.mods)),
        )

    console.print(table)


def display_keygroup_detail(index: int, keygroup: Keygroup) -> None:
    """Display envelopes, LFOs and modulations of one keygroup."""
    detail = Table(
        title=f"Keygroup {index}", box=box.SIMPLE, show_header=True, header_style="bold green"
    )
    detail.add_column("Block", style="cyan", width=12)
    detail.add_column("Raw", width=24)
    detail.add_column("Scaled", width=36)

    amp_curves = (scaling.AMP_ATTACK_CURVE, scaling.AMP_DECAY_CURVE, scaling.AMP_RELEASE_CURVE)
    filter_curves = (
        scaling.FILTER_ATTACK_CURVE,
        scaling.FILTER_DECAY_CURVE,
        scaling.FILTER_RELEASE_CURVE,
    )
    for label, env, curves in (
        ("Amp Env", keygroup.amp_env, amp_curves),
        ("Filter Env", keygroup.filter_env, filter_curves),
        ("Aux Env", keygroup.aux_env, filter_curves),
    ):
        if env is None:
            continue
        attack, decay, release = (
            scaling.envelope_time(raw, curve)
            for raw, curve in zip((env.attack, env.decay, env.release), curves)
        )
        detail.add_row(
            label,
            f"A{env.attack} D{env.decay} S{env.sustain} R{env.release}",
            f"A {attack:.3f}s D {decay:.3f}s R {release:.3f}s",
        )

    for label, lfo in (("LFO 1", keygroup.lfo1), ("LFO 2", keygroup.lfo2)):
        if lfo is None:
            continue
        detail.add_row(
            label,
            f"wave {lfo.waveform} rate {lfo.rate} delay {lfo.delay} depth {lfo.depth}",
            f"{enum_label(LfoWaveform, lfo.waveform)} {scaling.lfo_rate_to_hz(lfo.rate):.2f} Hz",
        )

    for mod in keygroup.mods:
        detail.add_row(
            "Mod",
            f"{mod.source} -> {mod.destination} @ {mod.amount}",
            f"{enum_label(ModSource, mod.source)} -> "
            f"{enum_label(ModDestination, mod.destination)} "
            f"({scaling.bipolar(mod.amount):+.2f})",
        )

    console.print(detail)


def _filter_summary(keygroup: Keygroup) -> str:
    flt = keygroup.filter
    if flt is None:
        return "-"
    if not flt.enabled:
        return "[dim]off[/dim]"
    return (
        f"{enum_label(FilterType, flt.filter_type)} "
        f"{scaling.cutoff_to_hz(flt.cutoff):.0f} Hz"
    )
