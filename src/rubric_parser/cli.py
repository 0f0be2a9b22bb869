"""Console script for rubric_parser."""

import json
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from .config.loader import ConfigLoader
from .config.models import AppConfig
from .output.console import build_instructions_view
from .output.html import render_instructions_html
from .rubrics.classifier import parse_instructions
from .rubrics.loader import InstructionsLoader
from .rubrics.splitter import split_instructions
from .utils.logging import get_logger, setup_logging

app = typer.Typer(help="Parse free-form grading rubrics into tables.")
console = Console()
err_console = Console(stderr=True)

logger = get_logger(__name__)


class OutputFormat(str, Enum):
    table = "table"
    json = "json"
    html = "html"


def _load_config(config_file: Path | None, verbose: bool) -> AppConfig:
    try:
        config = ConfigLoader().load(config_file)
    except (FileNotFoundError, ValueError, OSError) as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    level = logging.DEBUG if verbose else config.logging.numeric_level
    setup_logging(level=level, log_file=config.logging.file)
    return config


def _read_instructions(source: str) -> str:
    """Read instructions from a record file, or stdin for ``-``."""
    if source == "-":
        return sys.stdin.read()

    try:
        return InstructionsLoader().load(source)
    except (FileNotFoundError, ValueError, OSError) as e:
        logger.error(f"Could not read instructions from {source}: {e}")
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)


@app.command()
def parse(
    source: str = typer.Argument(..., help="Instructions file (.txt, .yml, .json) or '-' for stdin"),
    output_format: OutputFormat = typer.Option(
        OutputFormat.table, "--format", "-f", help="Output format"
    ),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Parse assignment instructions and show the rubric in canonical form."""
    config = _load_config(config_file, verbose)
    parsed = parse_instructions(_read_instructions(source))

    if parsed.rubric is None:
        logger.info("No rubric section found in instructions")
    else:
        logger.info(f"Parsed rubric as {parsed.rubric.type}")

    if output_format == OutputFormat.json:
        typer.echo(json.dumps(parsed.to_dict(), indent=2, ensure_ascii=False))
    elif output_format == OutputFormat.html:
        typer.echo(render_instructions_html(parsed, config.render))
    else:
        console.print(build_instructions_view(parsed, config.render))


@app.command()
def split(
    source: str = typer.Argument(..., help="Instructions file (.txt, .yml, .json) or '-' for stdin"),
):
    """Show the description and raw rubric sections of instructions."""
    result = split_instructions(_read_instructions(source))

    console.rule("Description")
    console.print(result.description, markup=False)
    console.rule("Rubric")
    if result.rubric_text is None:
        console.print("(no rubric section)", style="dim")
    else:
        console.print(result.rubric_text, markup=False)


if __name__ == "__main__":
    app()
