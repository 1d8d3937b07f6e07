"""Command for linting commit messages against the commit policy."""

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from .cli_types import ConfigOpt, QuietFlag, StrictFlag

logger = logging.getLogger(__name__)

# Exit codes
EXIT_OK = 0
EXIT_ERRORS = 1
EXIT_WARNINGS = 2

# --- Command Argument Annotations ---

MessageArg = Annotated[
	str | None,
	typer.Argument(
		help="Commit message to lint. Use '-' to read it from stdin.",
		show_default=False,
	),
]

EditOpt = Annotated[
	Path | None,
	typer.Option(
		"--edit",
		"-e",
		help="Read the message from a file, such as .git/COMMIT_EDITMSG",
		exists=True,
		dir_okay=False,
		readable=True,
	),
]

FromOpt = Annotated[
	str | None,
	typer.Option("--from", help="Lint every commit after this revision"),
]

ToOpt = Annotated[
	str,
	typer.Option("--to", help="Upper end of the --from range"),
]

# --- Registration Function ---


def register_command(app: typer.Typer) -> None:
	"""Register the lint command with the CLI app."""

	@app.command(name="lint")
	def lint_command(
		message: MessageArg = None,
		edit: EditOpt = None,
		from_ref: FromOpt = None,
		to_ref: ToOpt = "HEAD",
		config: ConfigOpt = None,
		strict: StrictFlag = False,
		quiet: QuietFlag = False,
	) -> None:
		"""
		Lint commit messages against the commit policy.

		Exits with 1 when an error-severity rule fails. Warnings are printed
		but accepted unless --strict is given.

		"""
		exit_code = _lint_command_impl(
			message=message,
			edit=edit,
			from_ref=from_ref,
			to_ref=to_ref,
			config=config,
			strict=strict,
			quiet=quiet,
		)
		if exit_code != EXIT_OK:
			raise typer.Exit(exit_code)


# --- Implementation Function (Heavy imports deferred here) ---


def _collect_messages(message: str | None, edit: Path | None, from_ref: str | None, to_ref: str) -> list[str]:
	"""Gather the messages to lint from exactly one input source."""
	from commitpolicy.utils.git_utils import get_commit_messages

	sources = [source for source in (message, edit, from_ref) if source is not None]
	if len(sources) != 1:
		msg = "Provide exactly one of: a MESSAGE argument, --edit FILE or --from REV"
		raise typer.BadParameter(msg)

	if edit is not None:
		return [edit.read_text(encoding="utf-8")]
	if from_ref is not None:
		return get_commit_messages(from_ref, to_ref)
	if message == "-":
		return [sys.stdin.read()]
	return [message or ""]


def _lint_command_impl(
	message: str | None,
	edit: Path | None,
	from_ref: str | None,
	to_ref: str,
	config: Path | None,
	strict: bool,
	quiet: bool,
) -> int:
	"""Lint the collected messages and return the process exit code."""
	from rich.console import Console

	from commitpolicy.errors import ConfigError, GitError
	from commitpolicy.linter import create_linter
	from commitpolicy.linter.formatter import print_report
	from commitpolicy.utils.cli_utils import exit_with_error, handle_keyboard_interrupt, show_warning
	from commitpolicy.utils.config_loader import ConfigLoader
	from commitpolicy.utils.git_utils import validate_repo_path

	out = Console()

	try:
		repo_root = validate_repo_path(Path.cwd())
		config_loader = ConfigLoader(config_file=config, repo_root=repo_root)
		settings = config_loader.get_lint_settings()
		linter = create_linter(config_loader=config_loader)
		messages = _collect_messages(message, edit, from_ref, to_ref)
	except ConfigError as e:
		exit_with_error("The commit policy could not be loaded.", exception=e)
	except GitError as e:
		exit_with_error("Could not read commits from git.", exception=e)
	except OSError as e:
		exit_with_error("Could not read the commit message.", exception=e)
	except KeyboardInterrupt:
		handle_keyboard_interrupt()

	if from_ref is not None and not messages:
		show_warning(f"No commits found in {from_ref}..{to_ref}")
	logger.debug("Linting %d message(s)", len(messages))

	help_url = settings.get("help_url")
	reports = [linter.lint(text) for text in messages]
	for report in reports:
		print_report(out, report, help_url=help_url, quiet=quiet)

	if any(not report.valid for report in reports):
		return EXIT_ERRORS
	if (strict or settings.get("strict")) and any(report.warnings for report in reports):
		return EXIT_WARNINGS
	return EXIT_OK
