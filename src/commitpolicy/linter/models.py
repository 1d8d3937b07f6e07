"""Data models for parsed commit messages and lint results."""

from __future__ import annotations

from dataclasses import dataclass, field

from commitpolicy.policy.descriptor import RuleLevel


@dataclass(frozen=True)
class CommitMessage:
	"""
	A commit message split into its conventional parts.

	``lines`` holds the message after comment stripping; ``footer_index`` is
	the index into ``lines`` where the footer starts, if there is one.

	"""

	raw: str
	header: str
	type: str | None = None
	scope: str | None = None
	subject: str | None = None
	body: str | None = None
	footer: str | None = None
	breaking: bool = False
	lines: tuple[str, ...] = ()
	footer_index: int | None = None

	@property
	def body_lines(self) -> list[str]:
		"""Lines of the body, empty when there is no body."""
		return self.body.split("\n") if self.body else []

	@property
	def footer_lines(self) -> list[str]:
		"""Lines of the footer, empty when there is no footer."""
		return self.footer.split("\n") if self.footer else []


@dataclass(frozen=True)
class RuleViolation:
	"""A failed rule, with the severity it was configured at."""

	rule: str
	level: RuleLevel
	message: str

	@property
	def is_error(self) -> bool:
		"""Whether this violation rejects the commit."""
		return self.level is RuleLevel.ERROR


@dataclass
class LintReport:
	"""Outcome of linting one commit message."""

	message: str
	errors: list[RuleViolation] = field(default_factory=list)
	warnings: list[RuleViolation] = field(default_factory=list)
	ignored: bool = False
	breaking: bool = False

	@property
	def valid(self) -> bool:
		"""True when no error-severity rule failed."""
		return not self.errors

	@property
	def violations(self) -> list[RuleViolation]:
		"""Errors followed by warnings."""
		return [*self.errors, *self.warnings]

	@property
	def header(self) -> str:
		"""First line of the linted message."""
		return self.message.split("\n", 1)[0]
