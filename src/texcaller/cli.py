"""Typer CLI entrypoint for texcaller."""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from pydantic import ValidationError

from texcaller.config import DEFAULT_MAX_RUNS, DestinationFormat, Settings, SourceFormat
from texcaller.converter import convert
from texcaller.errors import ArgumentError
from texcaller.escape import escape_latex
from texcaller.logger import setup_logger

app = typer.Typer(help="Convert TeX/LaTeX source into DVI or PDF.", no_args_is_help=True)


@app.callback()
def main() -> None:
    """texcaller command group."""


def _read_source(source: str) -> bytes:
    if source == "-":
        return sys.stdin.buffer.read()
    try:
        return Path(source).read_bytes()
    except OSError as exc:
        typer.echo(f"Unable to read {source}: {exc.strerror or exc}", err=True)
        raise typer.Exit(code=1) from exc


def _default_output(source: str, destination_format: DestinationFormat) -> Path:
    if source == "-":
        typer.echo("--output is required when reading from stdin.", err=True)
        raise typer.Exit(code=2)
    return Path(source).with_suffix(destination_format.extension)


@app.command("convert")
def convert_command(
    source: str = typer.Argument(..., help="TeX/LaTeX source file, or - for stdin."),
    output: Path | None = typer.Option(None, "--output", "-o", dir_okay=False),
    source_format: SourceFormat = typer.Option(SourceFormat.LATEX, "--from"),
    destination_format: DestinationFormat = typer.Option(DestinationFormat.PDF, "--to"),
    max_runs: int = typer.Option(DEFAULT_MAX_RUNS, "--max-runs"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Compile SOURCE until its auxiliary file stabilizes and write the result."""

    try:
        settings = Settings.from_env()
    except ValidationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    setup_logger("DEBUG" if verbose else settings.log_level)

    output = output or _default_output(source, destination_format)
    result = convert(
        _read_source(source),
        source_format,
        destination_format,
        max_runs,
        settings=settings,
    )

    if not result.succeeded:
        typer.echo(result.info, err=True)
        raise typer.Exit(code=2 if isinstance(result.error, ArgumentError) else 1)

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(result.destination)
    except OSError as exc:
        typer.echo(f"Unable to write {output}: {exc.strerror or exc}", err=True)
        raise typer.Exit(code=1) from exc

    summary, _, transcript = result.info.partition("\n\n")
    typer.echo(summary)
    typer.echo(f"Output: {output}")
    if verbose and transcript:
        typer.echo(transcript, err=True)


@app.command()
def escape(
    text: str | None = typer.Argument(None, help="Text to escape; read from stdin when omitted."),
) -> None:
    """Print TEXT escaped for direct use in LaTeX."""

    if text is None:
        text = sys.stdin.read()
        if text.endswith("\n"):
            text = text[:-1]
    typer.echo(escape_latex(text))
