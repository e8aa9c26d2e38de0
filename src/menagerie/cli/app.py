"""Menagerie CLI application entry point.

Built with `Typer <https://typer.tiangolo.com/>`_ and
`Rich <https://rich.readthedocs.io/>`_.

Usage::

    menagerie run --filter=ry --count
    menagerie run --input regions.json --key pets --filter=Cat
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from menagerie.cli.config import MenagerieConfig, load_config
from menagerie.cli.errors import CLIError, ConfigError, UsageError, error_handler
from menagerie.cli.init_cmd import run_init
from menagerie.cli.logging_setup import setup_logging
from menagerie.data import load_sample_tree
from menagerie.models.node import Tree
from menagerie.tree_ops.exceptions import (
    InvalidTreeError,
    MissingFilterKeyError,
    UnrecognizedArgumentError,
)
from menagerie.tree_ops.pipeline import process_tree
from menagerie.tree_ops.serialization import dump_tree, load_tree

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

app = typer.Typer(
    name="menagerie",
    help="Menagerie – filter and count nested region / people / animal trees.",
    add_completion=False,
    no_args_is_help=True,
)

_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Version callback
# ---------------------------------------------------------------------------

def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from menagerie import __version__

        _console.print(f"menagerie {__version__}")
        raise typer.Exit()


# ---------------------------------------------------------------------------
# Main callback (global options)
# ---------------------------------------------------------------------------

@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) output.",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration TOML file.",
    ),
) -> None:
    """Global options for the Menagerie CLI."""
    with error_handler(_console):
        if config is not None and not config.exists():
            raise ConfigError(f"Configuration file not found: {config}")
        try:
            settings = load_config(config_path=config)
        except (tomllib.TOMLDecodeError, ValidationError) as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc

        level = "DEBUG" if verbose else settings.log_level
        setup_logging(level, settings.log_file)

    # Sub-commands read the resolved configuration from the context
    ctx.obj = settings


# ---------------------------------------------------------------------------
# Init command
# ---------------------------------------------------------------------------

@app.command()
def init(
    path: Optional[Path] = typer.Argument(
        None,
        help="Target directory to initialise. Defaults to current directory.",
    ),
) -> None:
    """Initialise a Menagerie project.

    Creates ``.menagerie/config.toml`` with the default configuration.
    """
    with error_handler(_console):
        config_path = run_init(path)
        _console.print(f"[green]Wrote default configuration to {config_path}[/green]")


# ---------------------------------------------------------------------------
# Run command
# ---------------------------------------------------------------------------


def _resolve_tree(input_file: Optional[Path], settings: MenagerieConfig) -> Tree:
    """Load the tree from --input, the configured data file, or the sample."""
    source = input_file
    if source is None and settings.data_file is not None:
        source = settings.data_file
        if not source.is_absolute():
            source = settings.project_dir / source

    if source is None:
        logger.debug("No input file given, using the bundled sample dataset")
        return load_sample_tree()

    logger.debug("Loading tree from %s", source)
    try:
        return load_tree(source)
    except FileNotFoundError as exc:
        raise CLIError(f"Input file not found: {source}") from exc
    except InvalidTreeError as exc:
        raise CLIError(str(exc)) from exc


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def run(
    ctx: typer.Context,
    input_file: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        help="JSON file holding the tree. Defaults to the bundled sample.",
    ),
    key: Optional[str] = typer.Option(
        None,
        "--key",
        "-k",
        help="Child-sequence field that filter patterns apply to.",
    ),
    indent: Optional[int] = typer.Option(
        None,
        "--indent",
        min=0,
        help="JSON indentation of the output.",
    ),
) -> None:
    """Filter and/or count the tree, then print it as JSON.

    Operation tokens follow the options: ``--filter=<pattern>`` (repeatable,
    every pattern must appear in a kept name) and ``--count``.
    """
    settings: MenagerieConfig = ctx.obj or MenagerieConfig()

    with error_handler(_console):
        tree = _resolve_tree(input_file, settings)
        target_field = key if key is not None else settings.filter_key

        try:
            result = process_tree(tree, ctx.args, target_field)
        except (UnrecognizedArgumentError, MissingFilterKeyError) as exc:
            raise UsageError(str(exc)) from exc

        logger.debug("Produced %d top-level node(s)", len(result))
        typer.echo(dump_tree(result, indent=indent if indent is not None else settings.indent))
