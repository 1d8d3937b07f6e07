"""
Commit linter package for validating git commit messages against the commit policy.

This package provides modules for parsing commit messages, evaluating the
policy's rules and reporting the outcome.

"""

from pathlib import Path

from commitpolicy.policy import PolicyDescriptor
from commitpolicy.utils.config_loader import ConfigLoader

from .linter import CommitLinter
from .models import CommitMessage, LintReport, RuleViolation
from .parser import parse_commit_message

__all__ = [
	"CommitLinter",
	"CommitMessage",
	"LintReport",
	"RuleViolation",
	"create_linter",
	"parse_commit_message",
]


def create_linter(
	allowed_types: list[str] | None = None,
	policy: PolicyDescriptor | None = None,
	config_path: str | Path | None = None,
	config_loader: ConfigLoader | None = None,
	repo_root: Path | None = None,
) -> CommitLinter:
	"""
	Create a CommitLinter with its configuration wired in.

	Args:
	    allowed_types: Override list of allowed commit types
	    policy: Pre-built PolicyDescriptor
	    config_path: Path to a policy file
	    config_loader: ConfigLoader instance for configuration (recommended)
	    repo_root: Repository root path

	Returns:
	    CommitLinter: Configured commit linter instance

	"""
	# Create a ConfigLoader if not provided
	if config_loader is None:
		config_loader = ConfigLoader(config_file=config_path, repo_root=repo_root)

	return CommitLinter(
		policy=policy,
		allowed_types=allowed_types,
		config_loader=config_loader,
	)
