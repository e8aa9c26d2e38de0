"""Menagerie CLI configuration management.

Loads configuration from TOML files with environment variable overrides
(``MENAGERIE_`` prefix).  Uses :mod:`tomllib` on Python 3.11+.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Default paths
# ---------------------------------------------------------------------------

DEFAULT_CONFIG_DIR = ".menagerie"
DEFAULT_CONFIG_FILE = "config.toml"
ENV_PREFIX = "MENAGERIE_"

# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


class MenagerieConfig(BaseModel):
    """Application configuration with sensible defaults.

    All fields can be overridden via environment variables with the
    ``MENAGERIE_`` prefix.  For example ``MENAGERIE_FILTER_KEY=pets``.
    """

    project_dir: Path = Field(default_factory=lambda: Path.cwd())
    filter_key: str = Field(default="animals", min_length=1)
    data_file: Optional[Path] = None
    indent: int = Field(default=2, ge=0)
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    model_config = {"extra": "ignore"}


# ---------------------------------------------------------------------------
# Loader helpers
# ---------------------------------------------------------------------------


def _apply_env_overrides(data: dict) -> dict:
    """Apply MENAGERIE_ environment variable overrides to *data*."""
    field_names = set(MenagerieConfig.model_fields.keys())
    for key, value in os.environ.items():
        if key.startswith(ENV_PREFIX):
            field = key[len(ENV_PREFIX):].lower()
            if field in field_names:
                data[field] = value
    return data


def load_config(config_path: Path | None = None, project_dir: Path | None = None) -> MenagerieConfig:
    """Load configuration from a TOML file with env-var overrides.

    Parameters
    ----------
    config_path:
        Explicit path to a TOML file.  When *None*, looks for
        ``<project_dir>/.menagerie/config.toml``.
    project_dir:
        Project root directory.  Defaults to :func:`Path.cwd`.

    Returns
    -------
    MenagerieConfig
        Parsed and validated configuration.

    Raises
    ------
    tomllib.TOMLDecodeError
        If the file is not valid TOML.
    pydantic.ValidationError
        If a value has the wrong type.
    """
    project = project_dir or Path.cwd()
    path = config_path or (project / DEFAULT_CONFIG_DIR / DEFAULT_CONFIG_FILE)

    data: dict = {}
    if path.exists():
        with open(path, "rb") as fh:
            data = tomllib.load(fh)

    # Flatten nested TOML sections if present
    flat: dict = {}
    for k, v in data.items():
        if isinstance(v, dict):
            flat.update(v)
        else:
            flat[k] = v

    flat.setdefault("project_dir", str(project))

    flat = _apply_env_overrides(flat)
    return MenagerieConfig(**flat)


def default_config_toml() -> str:
    """Return default configuration as a TOML string."""
    return """\
# Menagerie configuration

[general]
log_level = "INFO"

[tree]
# Child-sequence field that --filter patterns are matched against
filter_key = "animals"
# data_file = "regions.json"

[output]
indent = 2
"""
