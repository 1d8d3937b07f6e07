"""Human-readable rendering of lint reports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text

if TYPE_CHECKING:
	from rich.console import Console

	from .models import LintReport

INPUT_MARK = "⧗"
ERROR_MARK = "✖"
WARNING_MARK = "⚠"
INFO_MARK = "ⓘ"


def format_report(report: LintReport, help_url: str | None = None, show_input: bool = True) -> Text:
	"""
	Render a report the way commit-msg hooks usually print it.

	Args:
	        report: The report to render
	        help_url: Link appended when the report has problems
	        show_input: Whether to echo the linted header first

	Returns:
	        Text: Styled text, printable with a rich console

	"""
	text = Text()
	if show_input:
		text.append(f"{INPUT_MARK}   input: ", style="bold")
		text.append(f"{report.header}\n")
		if report.breaking:
			text.append(f"{INFO_MARK}   breaking change\n", style="bold magenta")

	if report.ignored:
		text.append(f"{INFO_MARK}   message ignored\n", style="dim")
		return text

	for violation in report.errors:
		text.append(f"{ERROR_MARK}   ", style="bold red")
		text.append(f"{violation.message} ")
		text.append(f"[{violation.rule}]\n", style="dim")
	for violation in report.warnings:
		text.append(f"{WARNING_MARK}   ", style="bold yellow")
		text.append(f"{violation.message} ")
		text.append(f"[{violation.rule}]\n", style="dim")

	if report.violations:
		mark, style = (ERROR_MARK, "bold red") if report.errors else (WARNING_MARK, "bold yellow")
		text.append("\n")
		text.append(f"{mark}   found {len(report.errors)} problems, {len(report.warnings)} warnings\n", style=style)
		if help_url:
			text.append(f"{INFO_MARK}   Get help: {help_url}\n", style="cyan")
	return text


def print_report(
	console: Console,
	report: LintReport,
	help_url: str | None = None,
	quiet: bool = False,
) -> None:
	"""
	Print a report to ``console``.

	Args:
	        console: Rich console to print to
	        report: Report to print
	        help_url: Link shown below problems
	        quiet: Only print reports that have problems

	"""
	if quiet and not report.violations:
		return
	console.print(format_report(report, help_url=help_url), end="", soft_wrap=True)
