#!/usr/bin/env python3
from __future__ import annotations

import sys
from pathlib import Path

import typer

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from svgcharts import ChartError, render_chart_file, set_default_theme  # noqa: E402
from svgcharts.theme import list_themes  # noqa: E402

app = typer.Typer(
    add_completion=False,
    help="Render line and bar charts to SVG from JSON/YAML params.",
)


@app.command("render")
def render(
    params: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Chart params file (JSON or YAML).",
    ),
    output_svg: Path = typer.Argument(
        ...,
        dir_okay=False,
        help="Output SVG path.",
    ),
    default_theme: str | None = typer.Option(
        None,
        "--default-theme",
        help="Theme used when the params file does not name one.",
    ),
) -> None:
    """Render a chart SVG."""
    if default_theme:
        set_default_theme(default_theme)
    try:
        render_chart_file(params, output_svg)
    except ChartError as exc:
        typer.echo(f"ERROR {exc.code}: {exc.message}", err=True)
        typer.echo(f"HINT: {exc.hint}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"ERROR E1199_UNEXPECTED: {exc}", err=True)
        typer.echo("HINT: Check the params file content.", err=True)
        raise typer.Exit(code=1)


@app.command("themes")
def themes() -> None:
    """List the built-in theme presets."""
    for name in list_themes():
        typer.echo(name)


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] not in {"render", "themes", "-h", "--help"}:
        sys.argv.insert(1, "render")
    app(prog_name="svgcharts")
