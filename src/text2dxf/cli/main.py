"""Typer CLI for text2dxf."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from text2dxf.application import DrawingSession
from text2dxf.application.config import (
    ScriptError,
    load_script,
    run_script,
)
from text2dxf.domain import STANDARD_LAYERS, DrawingError
from text2dxf.infrastructure import DEFAULT_FILENAME

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

app = typer.Typer(
    name="text2dxf",
    help="Build 2D architectural drawings from drawing commands and save them as DXF.",
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )


def _display_script_error(error: ScriptError) -> None:
    """Display a drawing script loading error."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


@app.command()
def draw(
    script_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON drawing script"),
    ],
    output: Annotated[
        str | None,
        typer.Option(
            "--output",
            "-o",
            help=f"Output filename ('.dxf' is appended if missing). "
            f"Defaults to {DEFAULT_FILENAME} when the script does not save itself.",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Directory for relative output filenames"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Run a drawing script and save the result as DXF.

    Example:
        text2dxf draw room.json -o room_3x5
    """
    _configure_logging(verbose)

    try:
        script = load_script(script_file)
    except ScriptError as e:
        _display_script_error(e)
        raise typer.Exit(code=1)

    session = DrawingSession(output_dir=output_dir)
    try:
        results = run_script(script, session)
        if output is not None or not script.saves:
            results.append(session.save_file(output or DEFAULT_FILENAME))
    except DrawingError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    for result in results:
        typer.echo(result.message)


@app.command()
def validate(
    script_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON drawing script to validate"),
    ],
) -> None:
    """Validate a drawing script without drawing anything.

    Exit codes:
        0 - Script is valid
        1 - Script has errors
    """
    try:
        script = load_script(script_file)
    except ScriptError as e:
        _display_script_error(e)
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    typer.echo(
        f"Script is valid: {len(script.layers)} layer(s), {len(script.commands)} command(s)."
    )


@app.command()
def layers() -> None:
    """List the standard layers every drawing starts with."""
    for layer in STANDARD_LAYERS:
        typer.echo(f"{layer.name:<16} color {layer.color}")


@app.command()
def serve(
    host: Annotated[str, typer.Option("--host", help="Interface to bind")] = "127.0.0.1",
    port: Annotated[int, typer.Option("--port", "-p", help="Port to listen on")] = 8000,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Directory for relative output filenames"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Serve the drawing REST API."""
    import uvicorn

    from text2dxf.web import create_app

    _configure_logging(verbose)
    uvicorn.run(create_app(output_dir=output_dir), host=host, port=port)


if __name__ == "__main__":
    app()
