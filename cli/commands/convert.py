"""
Convert command - single AKP file to SFZ or Decent Sampler.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from akpconv.converters import OutputFormat, convert_akp
from akpconv.utils.validation import AkpError
from cli.log import configure_logging

console = Console()
app = typer.Typer()


def resolve_format(name: str) -> OutputFormat:
    """Resolve --format or exit with an error."""
    try:
        return OutputFormat.from_name(name)
    except ValueError:
        console.print(f"[red]Error: Unknown output format: {name}[/red]")
        console.print("Supported formats: sfz, ds (dspreset)")
        raise typer.Exit(1)


@app.command()
def convert(
    source: Path = typer.Argument(..., help="Source .akp file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file path"),
    output_format: str = typer.Option(
        "sfz", "--format", "-f", help="Output format: sfz or ds (Decent Sampler)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed progress"),
) -> None:
    """
    Convert an AKP program to SFZ or Decent Sampler.

    The output goes next to the source unless --output is given.

    Examples:

        akpconv convert piano.akp

        akpconv convert piano.akp --format ds -o presets/piano.dspreset
    """
    configure_logging(verbose)

    if not source.exists():
        console.print(f"[red]Error: File '{source}' not found[/red]")
        raise typer.Exit(1)

    fmt = resolve_format(output_format)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=not verbose,
    ) as progress:
        task = progress.add_task(f"Converting to {fmt.display_name}...", total=None)

        try:
            output_path = convert_akp(source, output, fmt)
        except (AkpError, OSError) as e:
            console.print(f"[red]Error: {e}[/red]")
            if verbose:
                console.print_exception()
            raise typer.Exit(1)

        progress.update(task, description="Done!")

    console.print(f"[green]Converted:[/green] {source} -> {output_path}")


if __name__ == "__main__":
    app()
