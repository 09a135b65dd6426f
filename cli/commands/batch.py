"""
Batch command - convert every AKP file in a directory.
"""

from pathlib import Path
from typing import List, Tuple

import typer
from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn
from rich.table import Table
from rich import box

from akpconv.converters import convert_akp
from akpconv.utils.validation import AkpError
from cli.commands.convert import resolve_format
from cli.log import configure_logging

console = Console()
app = typer.Typer()


def find_akp_files(directory: Path) -> List[Path]:
    """List .akp files directly inside directory, sorted by name."""
    return sorted(p for p in directory.iterdir() if p.is_file() and p.suffix.lower() == ".akp")


@app.command()
def batch(
    directory: Path = typer.Argument(..., help="Directory containing .akp files"),
    output_format: str = typer.Option(
        "sfz", "--format", "-f", help="Output format: sfz or ds (Decent Sampler)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show parser warnings"),
) -> None:
    """
    Convert all .akp files in a directory.

    Each output is written next to its source. A failing file is reported
    and the batch carries on.

    Examples:

        akpconv batch ./programs/

        akpconv batch ./programs/ --format ds
    """
    configure_logging(verbose)

    if not directory.exists():
        console.print(f"[red]Error: Directory '{directory}' not found[/red]")
        raise typer.Exit(1)

    if not directory.is_dir():
        console.print(f"[red]Error: '{directory}' is not a directory[/red]")
        raise typer.Exit(1)

    fmt = resolve_format(output_format)

    akp_files = find_akp_files(directory)
    if not akp_files:
        console.print(f"[yellow]No .akp files found in directory: {directory}[/yellow]")
        return

    console.print(f"Starting batch conversion of {len(akp_files)} files...")

    converted: List[Path] = []
    errors: List[Tuple[str, str]] = []

    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(bar_width=40),
        MofNCompleteColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("Converting", total=len(akp_files))

        for akp_file in akp_files:
            progress.update(task, description=f"Processing {akp_file.name}")
            try:
                convert_akp(akp_file, output_format=fmt)
                converted.append(akp_file)
                progress.console.print(f"[green]OK[/green]   {akp_file.name}")
            except (AkpError, OSError) as e:
                errors.append((akp_file.name, str(e)))
                progress.console.print(f"[red]FAIL[/red] {akp_file.name}: {e}")
            progress.advance(task)

    summary = Table(title="Batch Summary", box=box.ROUNDED, show_header=False)
    summary.add_column("Result", style="bold")
    summary.add_column("Count", justify="right")
    summary.add_row("[green]Successful[/green]", str(len(converted)))
    summary.add_row("[red]Failed[/red]", str(len(errors)))
    summary.add_row("Total", str(len(akp_files)))
    console.print(summary)

    if errors:
        error_table = Table(title="Errors", box=box.SIMPLE, header_style="bold red")
        error_table.add_column("File", style="cyan")
        error_table.add_column("Error")
        for name, message in errors:
            error_table.add_row(name, message)
        console.print(error_table)


if __name__ == "__main__":
    app()
