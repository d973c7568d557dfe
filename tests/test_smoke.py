"""
Smoke tests — verify the bootstrap is healthy.

These tests ensure the basic scaffolding works:
- Package imports successfully
- CLI entrypoint responds
- Version is set
"""

from click.testing import CliRunner

from acis_locator import __version__
from acis_locator.main import cli


class TestBootstrap:
    """Verify the project bootstrap is healthy."""

    def test_version_is_set(self):
        """Version string should be defined and non-empty."""
        assert __version__
        assert isinstance(__version__, str)

    def test_cli_help(self):
        """CLI --help should exit cleanly with usage info."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "ACIS Locator" in result.output

    def test_cli_version(self):
        """CLI --version should print the version."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_commands_registered(self):
        """Every top-level command should be listed in --help."""
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        for name in ("locate", "paths", "arch", "toolkits", "config"):
            assert name in result.output

    def test_core_package_imports(self):
        """Core sub-packages should be importable."""
        import acis_locator.core.config.loader  # noqa: F401
        import acis_locator.core.models  # noqa: F401
        import acis_locator.core.services.locator  # noqa: F401
        import acis_locator.core.use_cases.locate  # noqa: F401
