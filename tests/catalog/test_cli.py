# SPDX-License-Identifier: MIT
"""Tests for the command line interface."""

import json

import pytest
from click.testing import CliRunner

from gamesdb import main as main_module
from gamesdb.config import get_settings
from gamesdb.main import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestMinifyCommand:
    """Test the minify command."""

    def test_success(self, runner, tmp_path, games_file, aliases_file):
        output = tmp_path / "out.json"
        result = runner.invoke(cli, [str(games_file), str(output), "--aliases", str(aliases_file)])

        assert result.exit_code == 0, result.output
        assert len(json.loads(output.read_text(encoding="utf-8"))["games"]) == 3
        assert "Minify Summary" in result.output

    def test_levenshtein_flag_prints_report(self, runner, tmp_path, games_file):
        output = tmp_path / "out.json"
        result = runner.invoke(cli, [str(games_file), str(output), "-l"])

        assert result.exit_code == 0, result.output
        assert "Levenshtein distances (in sorted order):" in result.output
        assert "Super Mario Bros. -> super mario bros = 4" in result.output

    def test_report_names_are_not_rich_markup(self, runner, tmp_path):
        """Square brackets in names should print literally."""
        games = tmp_path / "games.json"
        games.write_text(json.dumps({"games": [
            {"name": "Doom [bold]", "sources": []},
            {"name": "Doom [bolt]", "sources": []},
            {"name": "zzzzzzzzzzzzzzzz", "sources": []},
        ]}), encoding="utf-8")

        result = runner.invoke(cli, [str(games), str(tmp_path / "out.json"), "--levenshtein"])

        assert result.exit_code == 0, result.output
        assert "Doom [bold] -> Doom [bolt] = 1" in result.output

    def test_missing_output_path(self, runner, games_file):
        result = runner.invoke(cli, [str(games_file)])

        assert result.exit_code == 1
        assert "An error occurred:" in result.output
        assert "Output file not provided." in result.output

    def test_missing_input_path(self, runner):
        result = runner.invoke(cli, [])

        assert result.exit_code == 1
        assert "Input file not provided." in result.output

    def test_unparseable_input(self, runner, tmp_path):
        games = tmp_path / "games.json"
        games.write_text("{not json", encoding="utf-8")
        output = tmp_path / "out.json"

        result = runner.invoke(cli, [str(games), str(output)])

        assert result.exit_code == 1
        assert "not valid JSON" in result.output
        assert not output.exists()

    def test_unwritable_output(self, runner, tmp_path, games_file):
        result = runner.invoke(cli, [str(games_file), str(tmp_path / "no-such-dir" / "out.json")])

        assert result.exit_code == 1
        assert "Cannot write output file" in result.output

    def test_workers_option(self, runner, tmp_path, games_file):
        output = tmp_path / "out.json"
        result = runner.invoke(cli, [str(games_file), str(output), "-l", "--workers", "3"])

        assert result.exit_code == 0, result.output
        assert "Super Mario Bros. -> super mario bros = 4" in result.output


    def test_invalid_settings_are_reported(self, runner, tmp_path, games_file, monkeypatch):
        """Bad environment configuration should exit 1 with the error header."""
        monkeypatch.setenv("GAMESDB_SCAN_WORKERS", "0")
        get_settings.cache_clear()
        try:
            result = runner.invoke(cli, [str(games_file), str(tmp_path / "out.json")])
        finally:
            get_settings.cache_clear()

        assert result.exit_code == 1
        assert "An error occurred:" in result.output
        assert "scan_workers" in result.output
        assert not (tmp_path / "out.json").exists()

    def test_unusable_log_file_is_reported(self, runner, tmp_path, games_file):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("", encoding="utf-8")

        result = runner.invoke(cli, [
            str(games_file), str(tmp_path / "out.json"),
            "--log-file", str(blocker / "sub" / "log.txt"),
        ])

        assert result.exit_code == 1
        assert "An error occurred:" in result.output
        assert not (tmp_path / "out.json").exists()


class TestMainEntryPoint:
    """Test the console script wrapper."""

    def test_bad_option_exits_with_one(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["gamesdb-minify", "--workers", "zero"])

        with pytest.raises(SystemExit) as exc_info:
            main_module.main()

        assert exc_info.value.code == 1
        assert "--workers" in capsys.readouterr().err

    def test_invalid_settings_exit_with_one(self, monkeypatch, tmp_path, games_file, capsys):
        monkeypatch.setenv("GAMESDB_SCAN_WORKERS", "0")
        monkeypatch.setattr("sys.argv", ["gamesdb-minify", str(games_file), str(tmp_path / "out.json")])
        get_settings.cache_clear()
        try:
            with pytest.raises(SystemExit) as exc_info:
                main_module.main()
        finally:
            get_settings.cache_clear()

        assert exc_info.value.code == 1
        assert "An error occurred:" in capsys.readouterr().err
