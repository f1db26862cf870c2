"""CLI interface for osb."""

import os
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from .constants import DEFAULT_ENTRYPOINT, ENTRYPOINT_ENV_VAR
from .easing import Easing
from .output import (
    OsbOutputProvider,
    OutputProvider,
    PngPreviewOutputProvider,
    resolve_output_provider,
    supported_output_formats,
)
from .script import ScriptLoadError, load_storyboard
from .storyboard import Storyboard

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
SUPPORTED_OUTPUT_FORMATS_TEXT = ", ".join(supported_output_formats()).upper()

app = typer.Typer(help="Build osu! storyboard scripts from Python.")


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


@app.command()
def render(
    script: str = typer.Argument(..., help="Python file building the storyboard"),
    out: str = typer.Option(
        None,
        "--output",
        "-o",
        help=f"Write to a file ({SUPPORTED_OUTPUT_FORMATS_TEXT}) instead of stdout",
    ),
    entrypoint: str = typer.Option(
        None,
        "--entrypoint",
        "-e",
        help=f"Function returning the storyboard (default: ${ENTRYPOINT_ENV_VAR} or '{DEFAULT_ENTRYPOINT}')",
    ),
) -> None:
    """
    Run a storyboard script and write its .osb text.

    Examples:
      # Print the storyboard
      osb render storyboard.py

      # Save it next to the beatmap
      osb render storyboard.py -o "Artist - Title (Mapper).osb"
    """
    try:
        # Progress goes to stderr when stdout carries the storyboard itself
        storyboard = _load(script, entrypoint, console if out else err_console)
        if not out:
            storyboard.print()
            return
        _write_output(storyboard, _resolve_provider(out))

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


@app.command()
def preview(
    script: str = typer.Argument(..., help="Python file building the storyboard"),
    time: int = typer.Option(..., "--time", "-t", help="Timestamp to render, in milliseconds"),
    out: str = typer.Option(
        None,
        "--output",
        "-o",
        help="PNG file to write (default: <script>-<time>.png)",
    ),
    entrypoint: str = typer.Option(
        None,
        "--entrypoint",
        "-e",
        help="Function returning the storyboard",
    ),
    grid: bool = typer.Option(True, "--grid/--no-grid", help="Draw the playfield grid"),
) -> None:
    """Render the storyboard at one timestamp as a PNG preview."""
    try:
        if not out:
            out = f"{Path(script).stem}-{time}.png"
        if Path(out).suffix.lower() != ".png":
            raise CLIError(f"Preview output must be a .png file (got '{out}')")

        storyboard = _load(script, entrypoint, console)
        _write_output(storyboard, PngPreviewOutputProvider(out, time=time, grid=grid))

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


@app.command()
def easings() -> None:
    """List the easing curves with their protocol IDs."""
    table = Table(title="Easings")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Same curve as")

    for easing in Easing:
        aliases = ", ".join(
            other.osu_name for other in Easing if other is not easing and other == easing
        )
        table.add_row(str(easing.id), easing.osu_name, aliases)

    console.print(table)


def _resolve_entrypoint(entrypoint: str | None) -> str:
    return entrypoint or os.getenv(ENTRYPOINT_ENV_VAR) or DEFAULT_ENTRYPOINT


def _load(script: str, entrypoint: str | None, status_console: Console) -> Storyboard:
    """Run the script and return its storyboard."""
    name = _resolve_entrypoint(entrypoint)
    status_console.print(f"[bold blue]Loading {script} ({name})...[/bold blue]", highlight=False)
    try:
        return load_storyboard(script, name)
    except ScriptLoadError as e:
        raise CLIError(str(e))


def _resolve_provider(output_path: str) -> OutputProvider:
    try:
        return resolve_output_provider(output_path)
    except ValueError as exc:
        raise CLIError(str(exc))


def _write_output(storyboard: Storyboard, provider: OutputProvider) -> None:
    """Encode the storyboard with the provider and save it to the provider's path."""
    ext = Path(provider.path).suffix[1:].upper()
    if isinstance(provider, OsbOutputProvider):
        console.print("[bold blue]Writing storyboard script...[/bold blue]")
    else:
        console.print(f"[bold blue]Rendering {ext} preview...[/bold blue]")

    try:
        encoded = provider.encode(storyboard)
        provider.write(encoded)
    except Exception as e:
        raise CLIError(f"Failed to generate output: {e}")

    console.print(f"[green]✓[/green] {ext} saved to {provider.path}")


if __name__ == "__main__":
    app()
