"""Tests for version CLI command."""

from typer.testing import CliRunner

from logsweep import __version__
from logsweep.cli.main import app


runner = CliRunner()


class TestVersionCommand:
    """Tests for 'logsweep version' command."""

    def test_version_shows_version_number(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert f"LogSweep v{__version__}" in result.stdout
