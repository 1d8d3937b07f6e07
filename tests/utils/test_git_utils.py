"""Tests for git utilities."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from commitpolicy.errors import GitError
from commitpolicy.utils.git_utils import (
	RECORD_SEPARATOR,
	get_commit_messages,
	get_repo_root,
	run_git_command,
	validate_repo_path,
)


@pytest.mark.unit
@pytest.mark.git
class TestRunGitCommand:
	"""Running git subprocesses."""

	@patch("commitpolicy.utils.git_utils.subprocess.run")
	def test_success(self, mock_run: MagicMock) -> None:
		"""Standard output is returned."""
		mock_run.return_value = MagicMock(stdout="abc\n")
		assert run_git_command(["git", "status"]) == "abc\n"
		mock_run.assert_called_once_with(["git", "status"], cwd=None, capture_output=True, text=True, check=True)

	@patch("commitpolicy.utils.git_utils.subprocess.run")
	def test_failure(self, mock_run: MagicMock) -> None:
		"""Failing commands raise GitError with git's stderr."""
		mock_run.side_effect = subprocess.CalledProcessError(128, ["git", "log"], stderr="bad revision")
		with pytest.raises(GitError, match="bad revision"):
			run_git_command(["git", "log"])

	@patch("commitpolicy.utils.git_utils.subprocess.run")
	def test_git_missing(self, mock_run: MagicMock) -> None:
		"""A missing git executable raises GitError."""
		mock_run.side_effect = FileNotFoundError("git")
		with pytest.raises(GitError, match="git executable not found"):
			run_git_command(["git", "log"])


@pytest.mark.unit
@pytest.mark.git
class TestRepositoryHelpers:
	"""Repository root detection."""

	@patch("commitpolicy.utils.git_utils.run_git_command")
	def test_repo_root(self, mock_git: MagicMock) -> None:
		"""The top-level directory is returned as a path."""
		mock_git.return_value = "/work/headlamp\n"
		assert get_repo_root() == Path("/work/headlamp")

	@patch("commitpolicy.utils.git_utils.run_git_command")
	def test_not_a_repo(self, mock_git: MagicMock) -> None:
		"""Outside a repository validate_repo_path returns None."""
		mock_git.side_effect = GitError("fatal: not a git repository")
		with pytest.raises(GitError, match="Not in a Git repository"):
			get_repo_root()
		assert validate_repo_path(Path("/tmp")) is None


@pytest.mark.unit
@pytest.mark.git
class TestCommitMessages:
	"""Reading commit messages from history."""

	@patch("commitpolicy.utils.git_utils.run_git_command")
	def test_range(self, mock_git: MagicMock) -> None:
		"""Messages are split on the record separator, oldest first."""
		mock_git.return_value = (
			f"app: first\n\nbody\n{RECORD_SEPARATOR}\ndocs: second\n{RECORD_SEPARATOR}\n"
		)
		assert get_commit_messages("v1.0.0") == ["app: first\n\nbody", "docs: second"]
		command = mock_git.call_args.args[0]
		assert command[:3] == ["git", "log", "--reverse"]
		assert command[-1] == "v1.0.0..HEAD"

	@patch("commitpolicy.utils.git_utils.run_git_command")
	def test_empty_range(self, mock_git: MagicMock) -> None:
		"""An empty range yields no messages."""
		mock_git.return_value = ""
		assert get_commit_messages("main", "feature") == []

