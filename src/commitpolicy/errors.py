"""Exception and warning types raised by commitpolicy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from commitpolicy.linter.models import RuleViolation


class CommitPolicyError(Exception):
	"""Base exception for commitpolicy."""


class ConfigError(CommitPolicyError):
	"""Exception raised for configuration errors."""


class ConfigMalformed(ConfigError):  # noqa: N818
	"""Raised when the policy descriptor cannot be parsed or constructed at load time."""


class GitError(CommitPolicyError):
	"""Custom exception for Git-related errors."""


def _describe(violations: list[RuleViolation]) -> str:
	return "\n".join(f"{violation.message} [{violation.rule}]" for violation in violations)


class RuleViolationError(CommitPolicyError):
	"""
	Raised when a commit message fails one or more error-severity rules.

	Args:
	        violations: The error-severity violations, in rule evaluation order

	"""

	def __init__(self, violations: list[RuleViolation]) -> None:
		self.violations = violations
		super().__init__(_describe(violations))

	@property
	def rules(self) -> list[str]:
		"""Names of the violated rules."""
		return [violation.rule for violation in self.violations]


class RuleViolationWarning(UserWarning):
	"""Issued for a warning-severity rule violation; the message is still accepted."""
