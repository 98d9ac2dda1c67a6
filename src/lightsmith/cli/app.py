"""LightSmith CLI application.

Commands:
    prompt   - Print the text-to-image prompt for a lighting rig
    show     - Show every parameter of the rig
    preview  - Show 2D preview marker placement

Every command starts from the default rig and applies ``--set`` overrides
(``light.field=value``, repeatable) and ``--no-fill`` / ``--no-rim``.
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from lightsmith import __version__
from lightsmith.core.rig import LightingConfig
from lightsmith.core.types import LightRole
from lightsmith.errors import LightSmithError
from lightsmith.prompt.synthesis import format_number, synthesize

app = typer.Typer(
    name="lightsmith",
    help="Studio lighting setup to text-to-image prompt generator.",
    no_args_is_help=True,
)
console = Console()

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)

_TRUE_WORDS = {"true", "on", "yes"}
_FALSE_WORDS = {"false", "off", "no"}

SET_HELP = "Override a parameter as light.field=value (e.g. key.intensity=80). Repeatable."


def version_callback(value: bool):
    if value:
        console.print(f"LightSmith v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False, "--version", "-V", help="Show version and exit.",
        callback=version_callback, is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    if verbose:
        logging.getLogger("lightsmith").setLevel(logging.DEBUG)


def _parse_value(light: str, field_name: str, raw: str):
    """Interpret an override value: bool word, int, float, else string."""
    text = raw.strip()
    if field_name == "color" and light.strip().lower() in {"background", "backdrop"}:
        return text
    lowered = text.lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    for cast in (int, float):
        try:
            return cast(text)
        except ValueError:
            pass
    return text


def _parse_override(spec: str) -> tuple[str, str, object]:
    """Split ``light.field=value`` into its parts."""
    target, sep, raw = spec.partition("=")
    light, dot, field_name = target.strip().partition(".")
    if not sep or not dot or not light or not field_name.strip():
        raise typer.BadParameter(
            f"Invalid override '{spec}': expected light.field=value"
        )
    field_name = field_name.strip()
    return light, field_name, _parse_value(light, field_name, raw)


def _build_config(
    overrides: Optional[list[str]],
    no_fill: bool,
    no_rim: bool,
) -> LightingConfig:
    """Default rig with CLI overrides applied; exits on invalid values."""
    parsed = [_parse_override(spec) for spec in overrides or []]
    config = LightingConfig()
    try:
        for light, field_name, value in parsed:
            config.update(light, field_name, value)
        if no_fill and config.fill.enabled:
            config.toggle(LightRole.FILL)
        if no_rim and config.rim.enabled:
            config.toggle(LightRole.RIM)
    except LightSmithError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)
    return config


@app.command()
def prompt(
    overrides: Optional[list[str]] = typer.Option(None, "--set", "-s", help=SET_HELP),
    no_fill: bool = typer.Option(False, "--no-fill", help="Switch the fill light off."),
    no_rim: bool = typer.Option(False, "--no-rim", help="Switch the rim light off."),
    plain: bool = typer.Option(
        False, "--plain", help="Print only the prompt text (for piping to a clipboard tool).",
    ),
):
    """Print the generated prompt for text-to-image AI."""
    config = _build_config(overrides, no_fill, no_rim)
    text = synthesize(config.snapshot())

    if plain:
        typer.echo(text)
        return

    console.print(f"\n[bold]Generated Prompt for Text-to-Image AI[/bold]\n")
    console.print(text, markup=False, highlight=False)
    console.print(f"\n[dim]{len(text)} characters[/dim]\n")


@app.command()
def show(
    overrides: Optional[list[str]] = typer.Option(None, "--set", "-s", help=SET_HELP),
    no_fill: bool = typer.Option(False, "--no-fill", help="Switch the fill light off."),
    no_rim: bool = typer.Option(False, "--no-rim", help="Switch the rim light off."),
):
    """Show the rig parameters."""
    config = _build_config(overrides, no_fill, no_rim)
    _print_rig(config)


@app.command()
def preview(
    overrides: Optional[list[str]] = typer.Option(None, "--set", "-s", help=SET_HELP),
    no_fill: bool = typer.Option(False, "--no-fill", help="Switch the fill light off."),
    no_rim: bool = typer.Option(False, "--no-rim", help="Switch the rim light off."),
):
    """Show where each light sits in the 2D studio preview."""
    from lightsmith.preview.layout import compute_layout

    config = _build_config(overrides, no_fill, no_rim)
    layout = compute_layout(config)

    table = Table(title="Studio Preview", show_header=True, header_style="bold")
    table.add_column("Light", style="cyan")
    table.add_column("Top", justify="right")
    table.add_column("Left", justify="right")
    table.add_column("Opacity", justify="right")
    table.add_column("Blur", justify="right")
    table.add_column("Size", justify="right")
    for m in layout.markers:
        table.add_row(
            m.role.value,
            f"{m.top_pct:.1f}%",
            f"{m.left_pct:.1f}%",
            f"{m.opacity:.2f}",
            f"{m.blur_px}px",
            f"{m.size_px}px",
        )
    console.print(table)
    console.print(f"  Key direction: {layout.indicator_rotation_deg:.0f} deg")
    console.print(f"  Backdrop:      {layout.backdrop_color} at {layout.backdrop_depth:.0f}cm\n")


def _print_rig(config: LightingConfig):
    """Display every light's parameters in a formatted table."""
    table = Table(title="Lighting Rig", show_header=True, header_style="bold")
    table.add_column("Light", style="cyan")
    table.add_column("Status", justify="center")
    table.add_column("Type")
    table.add_column("Height", justify="right")
    table.add_column("Angle", justify="right")
    table.add_column("Intensity", justify="right")
    table.add_column("Color Temp", justify="right")
    table.add_column("Distance", justify="right")

    def status(role: LightRole) -> str:
        return "[green]On[/green]" if config.is_enabled(role) else "[dim]Off[/dim]"

    for role in (LightRole.KEY, LightRole.FILL, LightRole.RIM):
        p = config.parameters(role)
        fixture = getattr(p, "fixture_type", None)
        table.add_row(
            role.value,
            status(role),
            fixture.value if fixture is not None else "-",
            f"{format_number(p.height)}cm",
            f"{format_number(p.angle)}°",
            f"{format_number(p.intensity)}%",
            f"{format_number(p.color_temperature)}K",
            f"{format_number(p.distance)}cm",
        )
    bg = config.background
    table.add_row(
        "background", status(LightRole.BACKGROUND), bg.color,
        "", "", "", "", f"{format_number(bg.distance)}cm",
    )

    console.print(table)


def main():
    """Entry point for the CLI."""
    app()
