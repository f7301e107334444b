"""Tests for CLI app entry point and config commands."""

from unittest.mock import patch

import yaml
from typer.testing import CliRunner

from switchboard import __version__
from switchboard.cli.app import app, main

runner = CliRunner()


def test_version_command():
    """Test 'version' prints switchboard version string."""
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert f"switchboard version {__version__}" in result.output


def test_no_args_shows_help():
    """Test invoking with no arguments shows help (no_args_is_help)."""
    result = runner.invoke(app, [])
    assert result.exit_code in (0, 2)
    assert "Usage" in result.output or "switchboard" in result.output


def test_config_init_writes_defaults(tmp_path):
    config_path = tmp_path / "switchboard.yaml"

    result = runner.invoke(app, ["config", "init", "--config", str(config_path)])

    assert result.exit_code == 0
    data = yaml.safe_load(config_path.read_text())
    assert data["keyed"]["duplicate_policy"] == "overwrite"
    assert data["broadcast"]["failure_policy"] == "isolate"


def test_config_init_refuses_overwrite(tmp_path):
    config_path = tmp_path / "switchboard.yaml"
    config_path.write_text("keyed:\n  duplicate_policy: reject\n")

    result = runner.invoke(app, ["config", "init", "--config", str(config_path)])

    assert result.exit_code == 1
    assert "already exists" in result.output
    assert "reject" in config_path.read_text()


def test_config_init_force(tmp_path):
    config_path = tmp_path / "switchboard.yaml"
    config_path.write_text("keyed:\n  duplicate_policy: reject\n")

    result = runner.invoke(app, ["config", "init", "--config", str(config_path), "--force"])

    assert result.exit_code == 0
    assert "overwrite" in config_path.read_text()


def test_config_show(tmp_path):
    config_path = tmp_path / "switchboard.yaml"
    config_path.write_text("broadcast:\n  failure_policy: fail_fast\n")

    result = runner.invoke(app, ["config", "show", "--config", str(config_path)])

    assert result.exit_code == 0
    assert "fail_fast" in result.output
    assert "overwrite" in result.output


def test_config_show_missing_file_uses_defaults(tmp_path):
    result = runner.invoke(app, ["config", "show", "--config", str(tmp_path / "none.yaml")])

    assert result.exit_code == 0
    assert "isolate" in result.output


def test_config_show_invalid(tmp_path):
    config_path = tmp_path / "switchboard.yaml"
    config_path.write_text("keyed:\n  duplicate_policy: sometimes\n")

    result = runner.invoke(app, ["config", "show", "--config", str(config_path)])

    assert result.exit_code == 1


def test_main_keyboard_interrupt():
    """Test main() handles KeyboardInterrupt with exit code 130."""
    with (
        patch("switchboard.cli.app.app", side_effect=KeyboardInterrupt),
        patch("switchboard.cli.app.sys") as mock_sys,
    ):
        main()
        mock_sys.exit.assert_called_once_with(130)


def test_main_generic_error():
    """Test main() reports unexpected errors with exit code 1."""
    with (
        patch("switchboard.cli.app.app", side_effect=RuntimeError("boom")),
        patch("switchboard.cli.app.sys") as mock_sys,
    ):
        main()
        mock_sys.exit.assert_called_once_with(1)
