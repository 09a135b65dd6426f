"""
akpconv - Convert Akai AKP sampler programs to SFZ and Decent Sampler.

A small CLI around the akpconv library.
"""

import typer
from rich.console import Console

from akpconv import __version__
from cli.commands.batch import batch
from cli.commands.convert import convert
from cli.commands.info import info

console = Console()

# Main app
app = typer.Typer(
    name="akpconv",
    help="Convert Akai AKP program files to SFZ or Decent Sampler presets.",
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="convert")(convert)
app.command(name="batch")(batch)
app.command(name="info")(info)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]akpconv[/bold] version {__version__}")
    console.print("[dim]Akai AKP to SFZ / Decent Sampler converter[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
) -> None:
    """
    akpconv - Convert Akai sampler programs.

    Output formats:

    - [cyan]sfz[/cyan] SFZ text (.sfz), the default
    - [cyan]ds[/cyan] Decent Sampler preset (.dspreset)

    [bold]Examples:[/bold]

        akpconv convert piano.akp              # piano.sfz
        akpconv convert piano.akp --format ds  # piano.dspreset
        akpconv batch ./programs/ --format ds  # every .akp in a folder
        akpconv info piano.akp                 # show parsed program
    """
    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
