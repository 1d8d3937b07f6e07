"""Git utilities for commitpolicy."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from commitpolicy.errors import GitError

logger = logging.getLogger(__name__)

# Separates commit messages in `git log` output
RECORD_SEPARATOR = "\x1e"


def run_git_command(command: list[str], cwd: Path | None = None) -> str:
	"""Run a Git command and return its output.

	Args:
	    command: Git command to run
	    cwd: Working directory (optional)

	Returns:
	    Command output as string

	Raises:
	    GitError: If the command fails or git is not installed
	"""
	try:
		result = subprocess.run(  # noqa: S603
			command,
			cwd=cwd,
			capture_output=True,
			text=True,
			check=True,
		)
	except subprocess.CalledProcessError as e:
		error_msg = f"Git command failed: {' '.join(command)}\nError: {e.stderr}"
		logger.debug(error_msg)
		raise GitError(error_msg) from e
	except FileNotFoundError as e:
		msg = "git executable not found"
		raise GitError(msg) from e
	else:
		return result.stdout


def get_repo_root(path: Path | None = None) -> Path:
	"""Get the root directory of the Git repository.

	Args:
	    path: Optional path to start searching from

	Returns:
	    Path to repository root

	Raises:
	    GitError: If not in a Git repository
	"""
	try:
		result = run_git_command(["git", "rev-parse", "--show-toplevel"], path)
		return Path(result.strip())
	except GitError as e:
		msg = "Not in a Git repository"
		raise GitError(msg) from e


def validate_repo_path(path: Path | None = None) -> Path | None:
	"""Validate and return the repository path.

	Args:
	    path: Path to validate (defaults to the current directory)

	Returns:
	    Repository root, or None if ``path`` is not inside a repository
	"""
	try:
		return get_repo_root(path)
	except GitError:
		return None


def get_commit_messages(from_ref: str, to_ref: str = "HEAD", cwd: Path | None = None) -> list[str]:
	"""Get the full messages of the commits in ``from_ref..to_ref``.

	Args:
	    from_ref: Exclusive lower bound of the range
	    to_ref: Inclusive upper bound of the range
	    cwd: Working directory (optional)

	Returns:
	    Commit messages, oldest first

	Raises:
	    GitError: If the range cannot be read
	"""
	output = run_git_command(
		["git", "log", "--reverse", f"--format=%B{RECORD_SEPARATOR}", f"{from_ref}..{to_ref}"],
		cwd,
	)
	messages = [record.strip("\n") for record in output.split(RECORD_SEPARATOR)]
	return [message for message in messages if message.strip()]

