"""Tests for report rendering."""

from __future__ import annotations

import pytest
from rich.console import Console

from commitpolicy.linter.formatter import format_report, print_report
from commitpolicy.linter.models import LintReport, RuleViolation
from commitpolicy.policy import RuleLevel

HELP_URL = "https://example.org/guidelines"


def make_report() -> LintReport:
	"""A report with one error and one warning."""
	return LintReport(
		message="feature: add X\nbody",
		errors=[RuleViolation("type-enum", RuleLevel.ERROR, "type must be one of [app]")],
		warnings=[RuleViolation("body-leading-blank", RuleLevel.WARNING, "body must have leading blank line")],
	)


@pytest.mark.unit
class TestFormatReport:
	"""Plain-text content of rendered reports."""

	def test_problems(self) -> None:
		"""Errors, warnings, the summary and the help link are listed."""
		text = format_report(make_report(), help_url=HELP_URL).plain
		assert "⧗   input: feature: add X\n" in text
		assert "✖   type must be one of [app] [type-enum]\n" in text
		assert "⚠   body must have leading blank line [body-leading-blank]\n" in text
		assert "✖   found 1 problems, 1 warnings\n" in text
		assert f"ⓘ   Get help: {HELP_URL}" in text

	def test_valid(self) -> None:
		"""A clean report only echoes its input."""
		text = format_report(LintReport(message="app: fix"), help_url=HELP_URL).plain
		assert text == "⧗   input: app: fix\n"

	def test_breaking(self) -> None:
		"""Breaking changes are flagged below the input."""
		text = format_report(LintReport(message="backend!: drop v1", breaking=True)).plain
		assert text == "⧗   input: backend!: drop v1\nⓘ   breaking change\n"

	def test_ignored(self) -> None:
		"""Ignored messages say so."""
		text = format_report(LintReport(message="Merge branch 'x'", ignored=True), show_input=False).plain
		assert text == "ⓘ   message ignored\n"


@pytest.mark.unit
class TestPrintReport:
	"""Printing to a console."""

	def test_quiet_skips_clean_reports(self) -> None:
		"""Quiet mode prints nothing for clean messages."""
		console = Console(record=True, width=200)
		print_report(console, LintReport(message="app: fix"), quiet=True)
		assert console.export_text() == ""

	def test_prints_problems(self) -> None:
		"""Problems are printed even in quiet mode."""
		console = Console(record=True, width=200)
		print_report(console, make_report(), quiet=True)
		assert "found 1 problems, 1 warnings" in console.export_text()
