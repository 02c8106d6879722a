"""
Tests for the userql command line interface
"""

from unittest.mock import patch

from click.testing import CliRunner

from userql import __version__
from userql.cli import APP_IMPORT_PATH, cli
from userql.config import settings
from userql.graphql.schema import SCHEMA_SDL_PATH, get_schema_sdl


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_export_schema_to_stdout():
    result = CliRunner().invoke(cli, ["export-schema"])

    assert result.exit_code == 0
    assert result.output == get_schema_sdl() + "\n"
    assert "listUsers(limit: Int): [User!]!" in result.output


def test_export_schema_to_file(tmp_path):
    output = tmp_path / "schema.graphql"
    result = CliRunner().invoke(cli, ["export-schema", "--output", str(output)])

    assert result.exit_code == 0
    assert "Schema written" in result.output
    assert output.read_text(encoding="utf-8") == get_schema_sdl() + "\n"


def test_export_schema_matches_checked_in_contract():
    result = CliRunner().invoke(cli, ["export-schema"])

    exported = {line.strip() for line in result.output.splitlines() if line.strip()}
    contract = {
        line.strip()
        for line in SCHEMA_SDL_PATH.read_text(encoding="utf-8").splitlines()
        if line.strip()
    }
    assert exported == contract


class TestServe:
    def test_defaults_come_from_settings(self):
        from userql.api.app import app

        with patch("userql.cli.uvicorn.run") as mock_run:
            result = CliRunner().invoke(cli, ["serve"])

        assert result.exit_code == 0, result.output
        args, kwargs = mock_run.call_args
        assert args[0] is app
        assert kwargs["host"] == settings.api_host
        assert kwargs["port"] == settings.api_port
        assert kwargs["reload"] is settings.api_reload
        assert kwargs["log_level"] == settings.log_level.lower()

    def test_reload_runs_import_string_with_single_worker(self):
        with patch("userql.cli.uvicorn.run") as mock_run:
            result = CliRunner().invoke(cli, ["serve", "--port", "9000", "--reload", "--workers", "4"])

        assert result.exit_code == 0, result.output
        args, kwargs = mock_run.call_args
        assert args[0] == APP_IMPORT_PATH
        assert kwargs["port"] == 9000
        assert kwargs["reload"] is True
        assert kwargs["workers"] == 1

    def test_multiple_workers_run_import_string(self):
        with patch("userql.cli.uvicorn.run") as mock_run:
            result = CliRunner().invoke(cli, ["serve", "--no-reload", "--workers", "3"])

        assert result.exit_code == 0, result.output
        args, kwargs = mock_run.call_args
        assert args[0] == APP_IMPORT_PATH
        assert kwargs["workers"] == 3

    def test_rejects_zero_workers(self):
        result = CliRunner().invoke(cli, ["serve", "--workers", "0"])

        assert result.exit_code == 2

    def test_startup_failure_exits_with_error(self):
        with patch("userql.cli.uvicorn.run", side_effect=RuntimeError("boom")):
            result = CliRunner().invoke(cli, ["serve", "--workers", "2"])

        assert result.exit_code == 1
        assert "boom" in result.output
