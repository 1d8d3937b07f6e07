"""Case conversions used by the ``*-case`` rules."""

from __future__ import annotations

import re
from collections.abc import Callable

# Words as camelCase, PascalCase, snake_case and kebab-case split them
_WORD_PATTERN = re.compile(r"[A-Z]{2,}(?=[A-Z][a-z]+[0-9]*|\b)|[A-Z]?[a-z]+[0-9]*|[A-Z]|[0-9]+")

# Quoted fragments are not subject to case checks
_QUOTED_PATTERN = re.compile(r"`.*?`|\".*?\"|'.*?'")


def _words(text: str) -> list[str]:
	return _WORD_PATTERN.findall(text)


def _upper_first(text: str) -> str:
	return text[:1].upper() + text[1:]


def _camel(text: str) -> str:
	words = [word.lower() for word in _words(text)]
	return "".join([*words[:1], *(word.capitalize() for word in words[1:])])


_CONVERTERS: dict[str, Callable[[str], str]] = {
	"lower-case": str.lower,
	"upper-case": str.upper,
	"camel-case": _camel,
	"pascal-case": lambda text: "".join(word.capitalize() for word in _words(text)),
	"kebab-case": lambda text: "-".join(word.lower() for word in _words(text)),
	"snake-case": lambda text: "_".join(word.lower() for word in _words(text)),
	"start-case": lambda text: " ".join(_upper_first(word) for word in _words(text)),
	"sentence-case": _upper_first,
}


def to_case(text: str, case: str) -> str:
	"""
	Convert ``text`` to the named case.

	Raises:
	        ValueError: If the case name is unknown

	"""
	converter = _CONVERTERS.get(case)
	if converter is None:
		msg = f"Unknown case '{case}'"
		raise ValueError(msg)
	return converter(text)


def is_case(text: str, case: str) -> bool:
	"""
	Check whether ``text`` is already in the named case.

	Quoted fragments are ignored. Text that converts to nothing, or to
	something starting with a digit, is in every case.

	"""
	candidate = _QUOTED_PATTERN.sub("", text).strip()
	converted = to_case(candidate, case)
	if not converted or converted[0].isdigit():
		return True
	return converted == candidate
