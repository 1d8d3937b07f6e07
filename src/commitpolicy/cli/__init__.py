"""Command-line interface package for commitpolicy."""

from __future__ import annotations

import datetime
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from commitpolicy import __version__
from commitpolicy.utils.log_setup import setup_logging

from .lint_cmd import register_command as register_lint_command
from .policy_cmd import register_command as register_policy_command

# Configure logging
logger = logging.getLogger(__name__)

# Determine the invoked command name for help message customization
invoked_command = Path(sys.argv[0]).name
if invoked_command == "cpl":
	alias_note = "\n\nNote: 'cpl' is an alias for 'commitpolicy'."
elif invoked_command == "commitpolicy":
	alias_note = "\n\nNote: You can also use 'cpl' as a shorter alias."
else:
	alias_note = ""

# Initialize the main CLI app
app = typer.Typer(
	help=f"CommitPolicy - lint commit messages against the project's commit policy\n\nVersion: {__version__}{alias_note}",
	no_args_is_help=True,
	context_settings={"help_option_names": ["-h", "--help"]},
)

# --- Global Options Callback ---


def _version_callback(value: bool) -> None:
	"""Callback for --version option."""
	if value:
		typer.echo(f"CommitPolicy version: {__version__}")
		raise typer.Exit


@app.callback(invoke_without_command=True)
def global_options(
	ctx: typer.Context,
	is_verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose logging.")] = False,
	is_output_log: Annotated[
		bool,
		typer.Option(
			"--save-log",
			help="Enable logging to a file. Logs to logs/commitpolicy_{datetime}.log.",
		),
	] = False,
	_version: Annotated[
		bool | None,
		typer.Option("--version", help="Show version and exit.", callback=_version_callback, is_eager=True),
	] = None,
) -> None:
	"""Global CLI options and logging setup."""
	ctx.meta["is_verbose"] = is_verbose
	ctx.meta["is_output_log"] = is_output_log

	log_file_path_to_use: Path | None = None
	if is_output_log:
		current_time = datetime.datetime.now(tz=datetime.UTC).strftime("%Y-%m-%d_%H-%M-%S")
		log_file_path_to_use = Path("logs") / f"commitpolicy_{current_time}.log"

	setup_logging(is_verbose=is_verbose, log_file_path=log_file_path_to_use)


# --- Register commands ---

register_lint_command(app)
register_policy_command(app)


# --- Main Entry Point ---
def main() -> int:
	"""Run the CLI application."""
	return app()


if __name__ == "__main__":
	sys.exit(main())
