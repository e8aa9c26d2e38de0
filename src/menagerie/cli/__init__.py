"""Menagerie CLI – command-line interface built with Typer and Rich.

- :data:`app` – The main Typer application
- :class:`MenagerieConfig` – Configuration model
- :func:`setup_logging` – Logging infrastructure
- :class:`CLIError` – Structured error handling
"""

from menagerie.cli.app import app
from menagerie.cli.config import MenagerieConfig, load_config
from menagerie.cli.errors import CLIError, ConfigError, UsageError, error_handler
from menagerie.cli.logging_setup import setup_logging

__all__ = [
    "CLIError",
    "ConfigError",
    "MenagerieConfig",
    "UsageError",
    "app",
    "error_handler",
    "load_config",
    "setup_logging",
]
