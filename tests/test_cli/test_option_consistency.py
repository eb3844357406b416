"""Tests for CLI option consistency across all commands."""

from typer.testing import CliRunner

from ado_backlog.cli.main import app


class TestOptionConsistency:
    """Test that CLI options are consistent across commands."""

    def setup_method(self):
        """Set up test runner."""
        self.runner = CliRunner(env={"NO_COLOR": "1", "TERM": "dumb"})

    def test_help_shorthand_works_on_all_commands(self):
        """Test that -h works for --help on all commands."""
        commands_to_test = [
            ["-h"],
            ["populate", "-h"],
            ["show", "-h"],
            ["version", "-h"],
        ]

        for cmd in commands_to_test:
            result = self.runner.invoke(app, cmd)
            assert result.exit_code == 0, (
                f"Command {' '.join(cmd)} failed: {result.stdout}"
            )
            assert "Usage:" in result.stdout, (
                f"No help text in {' '.join(cmd)}: {result.stdout}"
            )

    def test_populate_shorthands(self):
        """Test that populate exposes the documented shorthand options."""
        result = self.runner.invoke(app, ["populate", "-h"])
        assert result.exit_code == 0
        for flag in ["-o", "-p", "-t", "-d", "-v"]:
            assert flag in result.stdout, f"No {flag} shorthand shown for populate"
