"""Tests for the CLI entry points."""

from unittest.mock import patch

import pytest

from commitpolicy import __version__
from tests.base import CLITestBase


@pytest.mark.cli
@pytest.mark.unit
class TestCliEntry(CLITestBase):
	"""Test cases for the CLI entry points."""

	def test_main_function(self) -> None:
		"""
		Test the main function.

		main() runs the Typer app and returns its result.

		"""
		with patch("commitpolicy.cli.app") as mock_app:
			mock_app.return_value = 0

			from commitpolicy.cli import main

			assert main() == 0
			mock_app.assert_called_once()

	def test_module_import(self) -> None:
		"""The package exposes a Typer app and main()."""
		import commitpolicy.cli

		assert hasattr(commitpolicy.cli, "app")
		assert hasattr(commitpolicy.cli, "main")
		assert str(type(commitpolicy.cli.app)).endswith("typer.main.Typer'>")

	def test_help(self) -> None:
		"""--help lists the commands."""
		result = self.invoke_command(["--help"])

		assert result.exit_code == 0
		assert "Usage:" in result.output
		assert "lint" in result.output
		assert "policy" in result.output

	def test_version(self) -> None:
		"""--version prints the version and exits."""
		result = self.invoke_command(["--version"])

		assert result.exit_code == 0
		assert f"CommitPolicy version: {__version__}" in result.output

	def test_verbose_logging(self) -> None:
		"""-v enables debug logging for the command that follows."""
		with patch("commitpolicy.cli.setup_logging") as mock_setup:
			result = self.invoke_command(["-v", "policy", "check"])

		assert result.exit_code == 0
		mock_setup.assert_called_once_with(is_verbose=True, log_file_path=None)
