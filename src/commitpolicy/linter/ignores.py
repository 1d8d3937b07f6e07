"""Messages that are not linted: merges, reverts, fixups and configured patterns."""

from __future__ import annotations

import logging
import re

from commitpolicy.errors import ConfigMalformed

logger = logging.getLogger(__name__)

DEFAULT_IGNORES = (
	r"^Merge pull request #\d+ from ",
	r"^Merge (?:remote-tracking )?branch ",
	r"^Merge tag ",
	r"^Merged? .+ (?:in|into) .+",
	r"^[Rr]evert \"",
	r"^(?:amend|fixup|squash)! ",
	r"^Initial commit$",
	r"^Automatic merge",
	r"^Auto-merged .+ into .+",
)


def compile_ignores(patterns: list[str] | None, use_defaults: bool = True) -> list[re.Pattern[str]]:
	"""
	Compile ignore patterns.

	Args:
	        patterns: Extra regular expressions from the configuration
	        use_defaults: Whether to include the built-in merge/revert/fixup patterns

	Returns:
	        list[re.Pattern[str]]: Compiled patterns, matched against the whole message

	Raises:
	        ConfigMalformed: If a pattern is not a string or not a valid regex

	"""
	sources = [*(DEFAULT_IGNORES if use_defaults else ()), *(patterns or [])]
	compiled = []
	for source in sources:
		if not isinstance(source, str):
			msg = f"Ignore patterns must be strings, got {source!r}"
			raise ConfigMalformed(msg)
		try:
			compiled.append(re.compile(source))
		except re.error as e:
			msg = f"Invalid ignore pattern {source!r}: {e}"
			raise ConfigMalformed(msg) from e
	return compiled


def is_ignored(message: str, patterns: list[re.Pattern[str]]) -> bool:
	"""Return True when any pattern matches ``message``."""
	for pattern in patterns:
		if pattern.search(message):
			logger.debug("Message ignored by pattern %s", pattern.pattern)
			return True
	return False
