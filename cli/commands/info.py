"""
Info command - display a parsed AKP program.
"""

from pathlib import Path

import typer
from rich.console import Console

from akpconv.formats.akp.reader import AkpReader
from akpconv.utils.validation import AkpError
from cli.display.tables import display_keygroup_detail, display_program_info
from cli.log import configure_logging

console = Console()
app = typer.Typer()


@app.command()
def info(
    filepath: Path = typer.Argument(..., help="Source .akp file"),
    full: bool = typer.Option(False, "--full", "-F", help="Show every keygroup in detail"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show parser warnings"),
) -> None:
    """
    Show the program header and keygroups of an AKP file.

    Examples:

        akpconv info piano.akp

        akpconv info piano.akp --full
    """
    configure_logging(verbose)

    if not filepath.exists():
        console.print(f"[red]Error: File '{filepath}' not found[/red]")
        raise typer.Exit(1)

    if not AkpReader.can_read(filepath):
        console.print(f"[red]Error: '{filepath}' is not an Akai program file[/red]")
        raise typer.Exit(1)

    try:
        program = AkpReader.read(filepath)
    except AkpError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    display_program_info(program, str(filepath))

    if full:
        for index, keygroup in enumerate(program.keygroups, start=1):
            display_keygroup_detail(index, keygroup)


if __name__ == "__main__":
    app()
