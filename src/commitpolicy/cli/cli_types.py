"""Type definitions for CLI parameters."""

from pathlib import Path
from typing import Annotated

import typer

# Type aliases for common CLI parameters
ConfigOpt = Annotated[
	Path | None,
	typer.Option(
		"--config",
		"-c",
		help="Path to the policy file (defaults to .commitpolicy.yml at the repository root)",
	),
]

OutputOpt = Annotated[
	Path | None,
	typer.Option(
		"--output",
		"-o",
		help="Output file path (prints to stdout when omitted)",
	),
]

StrictFlag = Annotated[
	bool,
	typer.Option(
		"--strict",
		help="Fail with exit code 2 when only warnings were found",
	),
]

QuietFlag = Annotated[
	bool,
	typer.Option(
		"--quiet",
		"-q",
		help="Only print messages that have problems",
	),
]
