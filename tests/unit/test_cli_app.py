"""Unit tests for menagerie.cli.app – the main Typer application."""

from __future__ import annotations

import json
import os
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from menagerie.cli.app import app
from menagerie.cli.config import DEFAULT_CONFIG_DIR, DEFAULT_CONFIG_FILE
from menagerie.cli.errors import EXIT_CONFIG_ERROR, EXIT_GENERAL_ERROR, EXIT_USAGE_ERROR


runner = CliRunner()

TREE = [
    {
        "name": "North",
        "pets": [
            {"name": "Ann", "animals": [{"name": "Duck"}, {"name": "Cat"}]},
        ],
    },
    {
        "name": "South",
        "pets": [
            {"name": "Bob", "animals": [{"name": "Dog"}]},
        ],
    },
]


@pytest.fixture(autouse=True)
def _isolate(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run every invocation from an empty project without MENAGERIE_ overrides."""
    monkeypatch.chdir(tmp_path)
    for key in [k for k in os.environ if k.startswith("MENAGERIE_")]:
        monkeypatch.delenv(key)
    yield
    logger = logging.getLogger("menagerie")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def tree_file(tmp_path: Path) -> Path:
    path = tmp_path / "tree.json"
    path.write_text(json.dumps(TREE), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# --version / --help
# ---------------------------------------------------------------------------


class TestVersion:
    def test_version_flag(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_version_short_flag(self) -> None:
        result = runner.invoke(app, ["-V"])
        assert result.exit_code == 0
        assert "menagerie" in result.output


class TestHelp:
    def test_help_flag(self) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "run" in result.output

    def test_no_args_shows_help(self) -> None:
        result = runner.invoke(app, [])
        assert result.exit_code in (0, 2)
        assert "Usage" in result.output


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------


class TestRun:
    def test_no_operations_echoes_tree(self, tree_file: Path) -> None:
        result = runner.invoke(app, ["run", "--input", str(tree_file)])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout) == TREE

    def test_filter_and_count(self, tree_file: Path) -> None:
        result = runner.invoke(
            app, ["run", "-i", str(tree_file), "--filter=Duck", "--count"]
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout) == [
            {
                "name": "North [1]",
                "pets": [{"name": "Ann [1]", "animals": [{"name": "Duck"}]}],
            }
        ]

    def test_key_option_changes_target(self, tree_file: Path) -> None:
        result = runner.invoke(
            app, ["run", "-i", str(tree_file), "--key", "pets", "--filter=Bob"]
        )
        assert result.exit_code == 0, result.output
        assert [r["name"] for r in json.loads(result.stdout)] == ["South"]

    def test_indent_option(self, tree_file: Path) -> None:
        result = runner.invoke(app, ["run", "-i", str(tree_file), "--indent", "0"])
        assert result.exit_code == 0, result.output
        assert result.stdout.startswith("[\n{")

    def test_defaults_to_sample_dataset(self) -> None:
        result = runner.invoke(app, ["run", "--filter=Zzz"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout) == []

    def test_unrecognized_token_is_usage_error(self, tree_file: Path) -> None:
        result = runner.invoke(app, ["run", "-i", str(tree_file), "--bogus"])
        assert result.exit_code == EXIT_USAGE_ERROR
        assert "--bogus" in result.output

    def test_empty_filter_is_usage_error(self, tree_file: Path) -> None:
        result = runner.invoke(app, ["run", "-i", str(tree_file), "--filter="])
        assert result.exit_code == EXIT_USAGE_ERROR

    def test_positional_token_is_usage_error(self, tree_file: Path) -> None:
        result = runner.invoke(app, ["run", "-i", str(tree_file), "Duck"])
        assert result.exit_code == EXIT_USAGE_ERROR

    def test_missing_input_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["run", "-i", str(tmp_path / "nope.json")])
        assert result.exit_code == EXIT_GENERAL_ERROR
        assert "not found" in result.output

    def test_invalid_input_file(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text('{"name": "North"}', encoding="utf-8")
        result = runner.invoke(app, ["run", "-i", str(bad)])
        assert result.exit_code == EXIT_GENERAL_ERROR


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class TestRunWithConfig:
    def test_project_config_supplies_key_and_data(self, tmp_path: Path, tree_file: Path) -> None:
        config_dir = tmp_path / DEFAULT_CONFIG_DIR
        config_dir.mkdir()
        (config_dir / DEFAULT_CONFIG_FILE).write_text(
            '[tree]\nfilter_key = "pets"\ndata_file = "tree.json"\n'
        )
        result = runner.invoke(app, ["run", "--filter=Ann"])
        assert result.exit_code == 0, result.output
        assert [r["name"] for r in json.loads(result.stdout)] == ["North"]

    def test_cli_key_beats_config(self, tmp_path: Path, tree_file: Path) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text('filter_key = "pets"\n')
        result = runner.invoke(
            app,
            ["--config", str(config_file), "run", "-i", str(tree_file), "-k", "animals", "--filter=Dog"],
        )
        assert result.exit_code == 0, result.output
        assert [r["name"] for r in json.loads(result.stdout)] == ["South"]

    def test_env_key_override(
        self, tree_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MENAGERIE_FILTER_KEY", "pets")
        result = runner.invoke(app, ["run", "-i", str(tree_file), "--filter=Bob"])
        assert result.exit_code == 0, result.output
        assert [r["name"] for r in json.loads(result.stdout)] == ["South"]

    def test_missing_config_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["--config", str(tmp_path / "none.toml"), "run"])
        assert result.exit_code == EXIT_CONFIG_ERROR

    def test_invalid_config_value(self, tmp_path: Path) -> None:
        config_file = tmp_path / "bad.toml"
        config_file.write_text('indent = "wide"\n')
        result = runner.invoke(app, ["--config", str(config_file), "run"])
        assert result.exit_code == EXIT_CONFIG_ERROR


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------


class TestInit:
    def test_init_writes_config(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["init", str(tmp_path)])
        assert result.exit_code == 0, result.output
        assert (tmp_path / DEFAULT_CONFIG_DIR / DEFAULT_CONFIG_FILE).is_file()

    def test_init_twice_fails(self, tmp_path: Path) -> None:
        runner.invoke(app, ["init", str(tmp_path)])
        result = runner.invoke(app, ["init", str(tmp_path)])
        assert result.exit_code == EXIT_GENERAL_ERROR
