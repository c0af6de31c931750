"""Smoke tests for CLI commands.

Tests that CLI commands parse correctly and produce the expected files and
output. Uses Click's CliRunner with temporary state files so nothing under
the user's home directory is written.
"""

import json
import logging

import pytest
from click.testing import CliRunner

from palette_bridge.cli import main as cli_main
from palette_bridge.cli.main import cli
from palette_bridge.models import AppState, ThemeMode
from palette_bridge.palette import create_initial_state, export_state
from palette_bridge.persistence import PydanticPersistence


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach the handler each invocation installs on the root logger."""
    yield
    if cli_main._log_handler is not None:
        logging.getLogger().removeHandler(cli_main._log_handler)
        cli_main._log_handler = None


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'Palette Bridge' in result.output

    def test_version_flag(self, runner):
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert '0.1.0' in result.output

    @pytest.mark.parametrize("command", [
        "init", "parse", "paste", "interpolate", "resolve", "contrast", "export", "import",
    ])
    def test_command_help(self, runner, command):
        result = runner.invoke(cli, [command, '--help'])
        assert result.exit_code == 0


@pytest.mark.integration
class TestContrastCommand:
    """Test the contrast command."""

    def test_black_on_white(self, runner):
        result = runner.invoke(cli, ['contrast', '#000000', '#ffffff'])
        assert result.exit_code == 0
        assert '21.00:1 AAA' in result.output

    def test_accepts_oklch(self, runner):
        result = runner.invoke(cli, ['contrast', 'oklch(0 0 0)', 'fff'])
        assert result.exit_code == 0
        assert '#000000 / #ffffff' in result.output

    def test_invalid_color(self, runner):
        result = runner.invoke(cli, ['contrast', 'blue', '#ffffff'])
        assert result.exit_code == 2
        assert 'not a hex or oklch() color' in result.output


@pytest.mark.integration
class TestParseCommand:
    """Test the parse command."""

    def test_parse_stdin(self, runner):
        result = runner.invoke(cli, ['parse'], input="50: #eff6ff\n100: #dbeafe\n")
        assert result.exit_code == 0
        assert json.loads(result.output) == {"50": "#eff6ff", "100": "#dbeafe"}

    def test_parse_file(self, runner, tmp_path):
        source = tmp_path / "colors.txt"
        source.write_text("#eff6ff\n#dbeafe\n#bfdbfe\n", encoding="utf-8")
        result = runner.invoke(cli, ['parse', str(source)])
        assert result.exit_code == 0
        assert list(json.loads(result.output)) == ["50", "100", "200"]

    def test_parse_nothing(self, runner):
        result = runner.invoke(cli, ['parse'], input="hello\n")
        assert result.exit_code == 0
        assert json.loads(result.output) == {}


@pytest.mark.integration
class TestStateCommands:
    """Test init, resolve, paste and interpolate against a state file."""

    def test_init(self, runner, state_file):
        result = runner.invoke(cli, ['init', '--state', str(state_file)])
        assert result.exit_code == 0
        assert PydanticPersistence.load_json(state_file, AppState) == create_initial_state()

    def test_init_refuses_to_overwrite(self, runner, state_file):
        runner.invoke(cli, ['init', '--state', str(state_file)])
        result = runner.invoke(cli, ['init', '--state', str(state_file)])
        assert result.exit_code == 1
        result = runner.invoke(cli, ['init', '--force', '--state', str(state_file)])
        assert result.exit_code == 0

    def test_resolve_without_state_file_uses_sample(self, runner, state_file):
        result = runner.invoke(cli, ['resolve', '--json', '--state', str(state_file)])
        assert result.exit_code == 0
        resolved = json.loads(result.output)
        assert len(resolved) == 49
        assert resolved["primary"] == "#2563eb"
        assert not state_file.exists()

    def test_resolve_contrast_and_mode(self, runner, state_file):
        result = runner.invoke(cli, ['resolve', '--json', '-c', 'high', '-m', 'dark', '--state', str(state_file)])
        assert result.exit_code == 0
        assert json.loads(result.output)["primary"] == "#dbeafe"

    def test_resolve_table(self, runner, state_file):
        result = runner.invoke(cli, ['resolve', '--state', str(state_file)])
        assert result.exit_code == 0
        line = next(l for l in result.output.splitlines() if l.startswith('primary '))
        assert '#2563eb' in line
        assert 'primary.600' in line
        assert ':1 AA' in line

    def test_paste(self, runner, state_file, tmp_path):
        source = tmp_path / "colors.txt"
        source.write_text("600: #ff0000\n", encoding="utf-8")
        result = runner.invoke(cli, ['paste', 'primary', str(source), '--state', str(state_file)])
        assert result.exit_code == 0

        state = PydanticPersistence.load_json(state_file, AppState)
        assert state.palette_config.palettes["primary"].shades["600"].hex == "#ff0000"

        result = runner.invoke(cli, ['resolve', '--json', '--state', str(state_file)])
        assert json.loads(result.output)["primary"] == "#ff0000"

    def test_paste_unknown_palette(self, runner, state_file):
        result = runner.invoke(cli, ['paste', 'accent', '--state', str(state_file)], input="#ff0000\n")
        assert result.exit_code == 1
        assert "Unknown palette 'accent'" in result.output
        assert not state_file.exists()

    def test_paste_nothing(self, runner, state_file):
        result = runner.invoke(cli, ['paste', 'primary', '--state', str(state_file)], input="nothing\n")
        assert result.exit_code == 1
        assert not state_file.exists()

    def test_interpolate(self, runner, state_file):
        result = runner.invoke(cli, [
            'interpolate', '--palette', 'neutral', '-t', '150', '-t', '250', '--state', str(state_file),
        ])
        assert result.exit_code == 0
        assert '100-200' in result.output

        state = PydanticPersistence.load_json(state_file, AppState)
        assert state.interpolation_enabled
        assert set(state.palette_config.interpolated["neutral"]) == {"150", "250"}

    def test_interpolate_off(self, runner, state_file):
        runner.invoke(cli, ['interpolate', '-p', 'neutral', '-t', '150', '--state', str(state_file)])
        result = runner.invoke(cli, ['interpolate', '--off', '--state', str(state_file)])
        assert result.exit_code == 0

        state = PydanticPersistence.load_json(state_file, AppState)
        assert not state.interpolation_enabled
        assert state.palette_config.interpolated == {}


@pytest.mark.integration
class TestExportImport:
    """Test export and import commands."""

    @pytest.mark.parametrize("fmt,files", [
        ("css", ["theme.css"]),
        ("kotlin", ["Color.kt", "Theme.kt"]),
        ("material", ["material-theme.json"]),
        ("tokens", ["core.tokens.json", "light.tokens.json", "dark.tokens.json"]),
        ("state", ["palette-bridge.json"]),
    ])
    def test_export_writes_files(self, runner, state_file, tmp_path, fmt, files):
        out = tmp_path / "out"
        result = runner.invoke(cli, [
            'export', fmt, '--out', str(out), '--package', 'com.acme.theme', '--state', str(state_file),
        ])
        assert result.exit_code == 0
        assert sorted(p.name for p in out.iterdir()) == sorted(files)

    def test_export_kotlin_package(self, runner, state_file, tmp_path):
        out = tmp_path / "out"
        runner.invoke(cli, ['export', 'kotlin', '-o', str(out), '--package', 'com.acme.theme',
                            '--state', str(state_file)])
        assert (out / "Color.kt").read_text(encoding="utf-8").startswith("package com.acme.theme\n")

    def test_export_to_stdout(self, runner, state_file):
        result = runner.invoke(cli, ['export', 'material', '--state', str(state_file)])
        assert result.exit_code == 0
        assert json.loads(result.output)["schemes"]["light"]["primary"] == "#2563EB"

    def test_export_unknown_format(self, runner, state_file):
        result = runner.invoke(cli, ['export', 'scss', '--state', str(state_file)])
        assert result.exit_code == 2

    def test_import(self, runner, state_file, tmp_path):
        state = create_initial_state()
        state.active_theme_mode = ThemeMode.DARK
        snapshot = tmp_path / "snapshot.json"
        snapshot.write_text(export_state(state), encoding="utf-8")

        result = runner.invoke(cli, ['import', str(snapshot), '--state', str(state_file)])
        assert result.exit_code == 0
        assert PydanticPersistence.load_json(state_file, AppState).active_theme_mode.value == "dark"

    def test_import_rejected_leaves_state(self, runner, state_file, tmp_path):
        runner.invoke(cli, ['init', '--state', str(state_file)])
        before = state_file.read_text(encoding="utf-8")

        bad = tmp_path / "bad.json"
        bad.write_text('{"paletteConfig": {"palettes": {}}}', encoding="utf-8")
        result = runner.invoke(cli, ['import', str(bad), '--state', str(state_file)])

        assert result.exit_code == 1
        assert 'ERROR' in result.output
        assert state_file.read_text(encoding="utf-8") == before
