"""
Rule checks.

Every check receives the parsed message, the rule's applicability and its
parameter, and returns ``(valid, message)``. ``message`` describes the
requirement and is reported when the check fails.

"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

from commitpolicy.policy.descriptor import Applicability, RuleParameter

from .case import is_case

if TYPE_CHECKING:
	from .models import CommitMessage

RuleOutcome: TypeAlias = tuple[bool, str]
RuleCheck: TypeAlias = "Callable[[CommitMessage, Applicability, RuleParameter], RuleOutcome]"

RULES: dict[str, RuleCheck] = {}

# Scopes like "api/auth" or "api, auth" are checked segment by segment
_SCOPE_DELIMITERS = re.compile(r"\s*[/\\,]\s*")


def register(name: str) -> Callable[[RuleCheck], RuleCheck]:
	"""Register a rule check under ``name``."""

	def decorator(check: RuleCheck) -> RuleCheck:
		RULES[name] = check
		return check

	return decorator


def _negated(when: Applicability) -> bool:
	return when is Applicability.NEVER


def _must(when: Applicability) -> str:
	return "must not" if _negated(when) else "must"


def _apply(when: Applicability, result: bool) -> bool:
	return not result if _negated(when) else result


def _tokens(value: RuleParameter) -> tuple[str, ...]:
	if value is None:
		return ()
	if isinstance(value, tuple):
		return value
	return (str(value),)


# --- Shared checks ---


def _check_enum(label: str, items: list[str], when: Applicability, value: RuleParameter) -> RuleOutcome:
	allowed = _tokens(value)
	result = all(item in allowed for item in items)
	return _apply(when, result), f"{label} {_must(when)} be one of [{', '.join(allowed)}]"


def _check_case(text: str | None, label: str, when: Applicability, value: RuleParameter) -> RuleOutcome:
	cases = _tokens(value)
	message = f"{label} {_must(when)} be {' or '.join(cases)}"
	if not text:
		return True, message
	result = any(is_case(text, case) for case in cases)
	return _apply(when, result), message


def _check_empty(text: str | None, label: str, when: Applicability) -> RuleOutcome:
	is_empty = not text
	if _negated(when):
		return not is_empty, f"{label} may not be empty"
	return is_empty, f"{label} must be empty"


def _check_full_stop(text: str | None, label: str, when: Applicability, value: RuleParameter) -> RuleOutcome:
	stop = str(value)
	if not text:
		return True, ""
	if _negated(when):
		return not text.endswith(stop), f"{label} may not end with full stop"
	return text.endswith(stop), f"{label} must end with full stop"


def _check_max_line_length(lines: list[str], label: str, value: RuleParameter) -> RuleOutcome:
	limit = int(value or 0)
	longest = max((len(line) for line in lines), default=0)
	return longest <= limit, f"{label}'s lines must not be longer than {limit} characters"


def _check_leading_blank(has_blank: bool, label: str, when: Applicability) -> RuleOutcome:
	if _negated(when):
		return not has_blank, f"{label} must not have leading blank line"
	return has_blank, f"{label} must have leading blank line"


def _scopes(scope: str) -> list[str]:
	return [part for part in _SCOPE_DELIMITERS.split(scope) if part]


# --- Type ---


@register("type-enum")
def type_enum(message: CommitMessage, when: Applicability, value: RuleParameter) -> RuleOutcome:
	if not message.type:
		return True, ""
	return _check_enum("type", [message.type], when, value)


@register("type-case")
def type_case(message: CommitMessage, when: Applicability, value: RuleParameter) -> RuleOutcome:
	return _check_case(message.type, "type", when, value)


@register("type-empty")
def type_empty(message: CommitMessage, when: Applicability, value: RuleParameter) -> RuleOutcome:
	return _check_empty(message.type, "type", when)


# --- Scope ---


@register("scope-enum")
def scope_enum(message: CommitMessage, when: Applicability, value: RuleParameter) -> RuleOutcome:
	if not message.scope:
		return True, ""
	return _check_enum("scope", _scopes(message.scope), when, value)


@register("scope-case")
def scope_case(message: CommitMessage, when: Applicability, value: RuleParameter) -> RuleOutcome:
	if not message.scope:
		return True, ""
	outcomes = [_check_case(scope, "scope", when, value) for scope in _scopes(message.scope)]
	failed = [text for valid, text in outcomes if not valid]
	if failed:
		return False, failed[0]
	return True, ""


@register("scope-empty")
def scope_empty(message: CommitMessage, when: Applicability, value: RuleParameter) -> RuleOutcome:
	return _check_empty(message.scope, "scope", when)


# --- Subject ---


@register("subject-case")
def subject_case(message: CommitMessage, when: Applicability, value: RuleParameter) -> RuleOutcome:
	return _check_case(message.subject, "subject", when, value)


@register("subject-empty")
def subject_empty(message: CommitMessage, when: Applicability, value: RuleParameter) -> RuleOutcome:
	return _check_empty(message.subject, "subject", when)


@register("subject-full-stop")
def subject_full_stop(message: CommitMessage, when: Applicability, value: RuleParameter) -> RuleOutcome:
	return _check_full_stop(message.subject, "subject", when, value)


# --- Header ---


@register("header-case")
def header_case(message: CommitMessage, when: Applicability, value: RuleParameter) -> RuleOutcome:
	return _check_case(message.header, "header", when, value)


@register("header-full-stop")
def header_full_stop(message: CommitMessage, when: Applicability, value: RuleParameter) -> RuleOutcome:
	return _check_full_stop(message.header, "header", when, value)


@register("header-max-length")
def header_max_length(message: CommitMessage, when: Applicability, value: RuleParameter) -> RuleOutcome:
	limit = int(value or 0)
	length = len(message.header)
	return (
		length <= limit,
		f"header must not be longer than {limit} characters, current length is {length}",
	)


@register("header-min-length")
def header_min_length(message: CommitMessage, when: Applicability, value: RuleParameter) -> RuleOutcome:
	limit = int(value or 0)
	length = len(message.header)
	return (
		length >= limit,
		f"header must not be shorter than {limit} characters, current length is {length}",
	)


@register("header-trim")
def header_trim(message: CommitMessage, when: Applicability, value: RuleParameter) -> RuleOutcome:
	header = message.header
	leading = header != header.lstrip()
	trailing = header != header.rstrip()
	if leading and trailing:
		return False, "header must not be surrounded by whitespace"
	if leading:
		return False, "header must not start with whitespace"
	if trailing:
		return False, "header must not end with whitespace"
	return True, ""


# --- Body ---


@register("body-leading-blank")
def body_leading_blank(message: CommitMessage, when: Applicability, value: RuleParameter) -> RuleOutcome:
	if not message.body:
		return True, ""
	return _check_leading_blank(not message.lines[1].strip(), "body", when)


@register("body-empty")
def body_empty(message: CommitMessage, when: Applicability, value: RuleParameter) -> RuleOutcome:
	return _check_empty(message.body, "body", when)


@register("body-max-line-length")
def body_max_line_length(message: CommitMessage, when: Applicability, value: RuleParameter) -> RuleOutcome:
	return _check_max_line_length(message.body_lines, "body", value)


# --- Footer ---


@register("footer-leading-blank")
def footer_leading_blank(message: CommitMessage, when: Applicability, value: RuleParameter) -> RuleOutcome:
	if message.footer_index is None:
		return True, ""
	return _check_leading_blank(not message.lines[message.footer_index - 1].strip(), "footer", when)


@register("footer-empty")
def footer_empty(message: CommitMessage, when: Applicability, value: RuleParameter) -> RuleOutcome:
	return _check_empty(message.footer, "footer", when)


@register("footer-max-line-length")
def footer_max_line_length(message: CommitMessage, when: Applicability, value: RuleParameter) -> RuleOutcome:
	return _check_max_line_length(message.footer_lines, "footer", value)
