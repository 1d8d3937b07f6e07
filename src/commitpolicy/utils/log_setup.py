"""
Logging setup for commitpolicy.

Log records and error summaries go to stderr. Lint reports and exported
configuration are printed to stdout by the commands themselves, so hooks
and scripts can capture them separately.

"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.rule import Rule
from rich.text import Text

console = Console(stderr=True)

FILE_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s"


def _file_handler(log_file_path: Path | str) -> logging.Handler:
	path = Path(log_file_path)
	path.parent.mkdir(parents=True, exist_ok=True)
	handler = logging.FileHandler(path, mode="a", encoding="utf-8")
	handler.setLevel(logging.DEBUG)
	handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
	return handler


def setup_logging(
	is_verbose: bool = False,
	log_to_console: bool = True,
	log_file_path: Path | str | None = None,
) -> None:
	"""
	Set up logging configuration.

	Replaces any handlers already on the root logger, so calling it again
	(as every CLI invocation does) does not duplicate output.

	Args:
	    is_verbose: Log debug records, with time and source location
	    log_to_console: Whether to log to stderr through rich
	    log_file_path: Optional file that receives every record at debug level

	"""
	log_level = logging.DEBUG if is_verbose else logging.WARNING

	root_logger = logging.getLogger()
	root_logger.setLevel(logging.DEBUG if log_file_path else log_level)
	for handler in root_logger.handlers[:]:
		root_logger.removeHandler(handler)

	if log_to_console:
		root_logger.addHandler(
			RichHandler(
				console=console,
				level=log_level,
				rich_tracebacks=True,
				show_time=is_verbose,
				show_path=is_verbose,
			)
		)

	if log_file_path:
		try:
			root_logger.addHandler(_file_handler(log_file_path))
		except OSError as e:
			# Linting still works without the file log
			console.print(f"[bold red]Failed to set up file logging to {log_file_path}:[/] {e}")
		else:
			root_logger.debug("Logging to file: %s", log_file_path)


def _display_summary(title: str, message: str, style: str) -> None:
	console.print()
	console.print(Rule(Text(title, style=f"bold {style}"), style=style))
	console.print(Text(f"\n{message}\n"))
	console.print(Rule(style=style))
	console.print()


def display_error_summary(error_message: str) -> None:
	"""
	Display an error summary with a divider and a title.

	Args:
	        error_message: The error message to display

	"""
	_display_summary("Error Summary", error_message, "red")


def display_warning_summary(warning_message: str) -> None:
	"""Display a warning summary with a divider and a title."""
	_display_summary("Warning Summary", warning_message, "yellow")
