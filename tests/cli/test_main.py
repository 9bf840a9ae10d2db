"""Tests for the CLI group and global options."""

from citekit import __version__
from citekit.cli.main import cli


class TestCLIGroup:
    """Test the top-level command group."""

    def test_help(self, runner):
        """Help lists the commands."""
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "Citation formatting and source deduplication" in result.output
        for command in ("render", "dedupe", "keys", "check", "confidence", "styles"):
            assert command in result.output

    def test_version(self, runner):
        """--version prints the package version."""
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert f"citekit version {__version__}" in result.output

    def test_unknown_command(self, runner):
        """Unknown commands are usage errors."""
        result = runner.invoke(cli, ["cite-all"])
        assert result.exit_code == 2

    def test_invalid_config_file(self, runner, tmp_path):
        """A broken config file stops the CLI with a message."""
        config = tmp_path / "bad.yaml"
        config.write_text("style: [apa\n")

        result = runner.invoke(cli, ["--config", str(config), "styles"])

        assert result.exit_code == 1
        assert "Error loading config file" in result.output


class TestStylesCommand:
    """Test the styles listing."""

    def test_lists_every_style(self, runner):
        """Every style appears with an in-text example."""
        result = runner.invoke(cli, ["styles"])

        assert result.exit_code == 0
        for label in ("APA", "MLA", "Chicago", "IEEE"):
            assert label in result.output
        assert "(A Author et al., 2024)" in result.output
        assert "[1]" in result.output
