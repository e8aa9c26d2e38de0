"""Menagerie ``init`` command.

Creates the ``.menagerie/`` directory in the target directory and
writes a default configuration file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from menagerie.cli.config import DEFAULT_CONFIG_DIR, DEFAULT_CONFIG_FILE, default_config_toml
from menagerie.cli.errors import CLIError


def _write_default_config(project_dir: Path) -> Path:
    """Write the default config.toml, returning the path."""
    config_path = project_dir / DEFAULT_CONFIG_DIR / DEFAULT_CONFIG_FILE
    if config_path.exists():
        raise CLIError(f"Configuration already exists: {config_path}")
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(default_config_toml(), encoding="utf-8")
    return config_path


def run_init(path: Optional[Path] = None) -> Path:
    """Execute the init command logic.

    Parameters
    ----------
    path:
        Target directory.  Defaults to current working directory.

    Returns
    -------
    Path
        The configuration file that was written.
    """
    project_dir = (path or Path.cwd()).resolve()

    if not project_dir.exists():
        raise CLIError(f"Directory does not exist: {project_dir}")

    if not project_dir.is_dir():
        raise CLIError(f"Not a directory: {project_dir}")

    menagerie_dir = project_dir / DEFAULT_CONFIG_DIR
    if menagerie_dir.exists():
        raise CLIError(
            f"Already initialised: {menagerie_dir} exists.\n"
            "Remove it first or use a different directory."
        )

    return _write_default_config(project_dir)
