from __future__ import annotations

import json
import logging
from pathlib import Path

import click
import typer
import yaml

from .analyzer import analyze
from .config import AnalyzerConfig, load_config
from .export import export_text
from .report import render_report

app = typer.Typer(help="WordDash text statistics CLI.", no_args_is_help=True)


@app.callback()
def main_options(
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    """Configure logging before any sub-command runs."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level '{log_level}'.")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command("analyze")
def analyze_command(
    input_path: str = typer.Argument(
        "-", help="Text file to analyze, or '-' to read standard input."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    as_json: bool = typer.Option(
        False, "--json", help="Emit statistics as JSON instead of a text panel."
    ),
) -> None:
    """Analyze text and print its statistics."""
    cfg = _load_config_or_fail(config)
    text = _read_input(input_path)
    stats = analyze(text, cfg)
    if as_json:
        typer.echo(json.dumps(stats.to_dict(), indent=2, ensure_ascii=False))
    else:
        typer.echo(render_report(stats))


@app.command("export")
def export_command(
    input_path: str = typer.Argument(
        "-", help="Text file to export, or '-' to read standard input."
    ),
    output_path: Path = typer.Option(
        Path("."), "--output-path", "-o", help="Destination file or directory."
    ),
) -> None:
    """Save the raw input text as a UTF-8 text file."""
    text = _read_input(input_path)
    try:
        written = export_text(text, output_path)
    except OSError as exc:
        raise typer.BadParameter(str(exc), param_hint="--output-path") from exc
    typer.echo(f"Wrote {len(text)} characters to {written}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = AnalyzerConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_config_or_fail(path: Path | None) -> AnalyzerConfig:
    """Load configuration, reporting bad files as usage errors."""
    try:
        return load_config(path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _read_input(input_path: str) -> str:
    """Read a UTF-8 file, or standard input when given '-'."""
    try:
        with click.open_file(input_path, "r", encoding="utf-8") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(str(exc), param_hint="INPUT_PATH") from exc


if __name__ == "__main__":
    main()
