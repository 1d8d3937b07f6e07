"""Commit linter: evaluates a policy descriptor against commit messages."""

from __future__ import annotations

import logging
import warnings
from typing import TYPE_CHECKING

from commitpolicy.errors import ConfigMalformed, RuleViolationError, RuleViolationWarning
from commitpolicy.policy.descriptor import RuleLevel
from commitpolicy.policy.loader import build_policy, load_policy
from commitpolicy.utils.config_loader import ConfigLoader

from .ignores import compile_ignores, is_ignored
from .models import LintReport, RuleViolation
from .parser import parse_commit_message
from .rules import RULES

if TYPE_CHECKING:
	from commitpolicy.policy.descriptor import PolicyDescriptor, RuleEntry

	from .rules import RuleCheck

logger = logging.getLogger(__name__)


class CommitLinter:
	"""
	Lints commit messages against a commit policy.

	Only rules with a severity above disabled are evaluated. Error-severity
	failures make the message invalid; warning-severity failures are reported
	but the message stays valid.

	"""

	def __init__(
		self,
		policy: PolicyDescriptor | None = None,
		allowed_types: list[str] | None = None,
		config_loader: ConfigLoader | None = None,
		ignores: list[str] | None = None,
		ignore_defaults: bool | None = None,
	) -> None:
		"""
		Initialize the linter.

		Args:
		    policy: Descriptor to enforce; loaded through ``config_loader`` when omitted
		    allowed_types: Override the ``type-enum`` token set
		    config_loader: ConfigLoader for the policy and lint settings
		    ignores: Extra ignore patterns, added to the configured ones
		    ignore_defaults: Override whether merge/revert/fixup messages are skipped

		Raises:
		    ConfigMalformed: If the policy or the ignore patterns are malformed

		"""
		self.config_loader = config_loader or ConfigLoader.get_instance()
		settings = self.config_loader.get_lint_settings()

		descriptor = policy if policy is not None else load_policy(self.config_loader)
		if allowed_types is not None:
			entry = descriptor.get("type-enum")
			level = entry.severity if entry else RuleLevel.ERROR
			override = build_policy({"type-enum": [level, "always", list(allowed_types)]})
			descriptor = descriptor.override(override)
		self.policy = descriptor

		use_defaults = settings["ignore_defaults"] if ignore_defaults is None else ignore_defaults
		configured = settings.get("ignores") or []
		self._ignore_patterns = compile_ignores([*configured, *(ignores or [])], use_defaults=bool(use_defaults))

		self._checks = self._resolve_checks()

	def _resolve_checks(self) -> list[tuple[RuleEntry, RuleCheck]]:
		checks = []
		for entry in self.policy.active_rules():
			check = RULES.get(entry.name)
			if check is None:
				msg = f"No check is registered for rule '{entry.name}'"
				raise ConfigMalformed(msg)
			checks.append((entry, check))
		logger.debug("Linter ready with %d active rules", len(checks))
		return checks

	def is_ignored(self, message: str) -> bool:
		"""Whether ``message`` is skipped (merge, revert, fixup or a configured pattern)."""
		return is_ignored(message, self._ignore_patterns)

	def lint(self, message: str) -> LintReport:
		"""
		Lint a commit message.

		Args:
		    message: The commit message to lint

		Returns:
		    LintReport: Errors and warnings, in rule order

		"""
		parsed = parse_commit_message(message)
		report = LintReport(message=parsed.raw, breaking=parsed.breaking)

		if self.is_ignored(parsed.raw):
			report.ignored = True
			return report

		for entry, check in self._checks:
			valid, text = check(parsed, entry.applicability, entry.parameter)
			if valid:
				continue
			violation = RuleViolation(rule=entry.name, level=entry.severity, message=text)
			if violation.is_error:
				report.errors.append(violation)
			else:
				report.warnings.append(violation)

		logger.debug(
			"Linted %r: %d errors, %d warnings",
			report.header,
			len(report.errors),
			len(report.warnings),
		)
		return report

	def enforce(self, message: str) -> LintReport:
		"""
		Lint a message and surface violations as exceptions and warnings.

		Warning-severity violations are issued as ``RuleViolationWarning``;
		error-severity violations raise ``RuleViolationError``.

		Returns:
		    LintReport: The report of an accepted message

		Raises:
		    RuleViolationError: If any error-severity rule failed

		"""
		report = self.lint(message)
		for violation in report.warnings:
			warnings.warn(f"{violation.message} [{violation.rule}]", RuleViolationWarning, stacklevel=2)
		if report.errors:
			raise RuleViolationError(report.errors)
		return report
