"""
Commit policy descriptor.

A descriptor maps rule names to rule entries. Each entry carries a severity
level, an applicability condition and an optional rule-specific parameter:
an ordered tuple of allowed tokens, an integer bound, or a text value such as
a case name. Descriptors are immutable once built.

"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from commitpolicy.errors import ConfigMalformed

from .constants import ABSENT, BOUND, CASE_NAMES, CASE_RULES, RULE_PARAMETERS, TEXT, TOKENS

logger = logging.getLogger(__name__)

# Tagged parameter: tokens | bound | text | absent
RuleParameter = tuple[str, ...] | int | str | None

# Keys accepted in the mapping form of a rule
_FIELD_ALIASES = {
	"level": "severity",
	"severity": "severity",
	"rule": "applicability",
	"when": "applicability",
	"applicability": "applicability",
	"value": "parameter",
	"parameter": "parameter",
}

_MAX_RULE_ITEMS = 3


class RuleLevel(IntEnum):
	"""Severity of a rule violation."""

	DISABLED = 0
	WARNING = 1
	ERROR = 2

	@classmethod
	def parse(cls, value: object) -> RuleLevel:
		"""
		Convert a level given as ``2``, ``"2"``, ``"error"`` or ``"ERROR"``.

		Raises:
		        ValueError: If the value does not name a level

		"""
		if isinstance(value, RuleLevel):
			return value
		if isinstance(value, str) and value.strip().isdigit():
			value = int(value)
		if isinstance(value, int) and not isinstance(value, bool):
			try:
				return cls(value)
			except ValueError:
				pass
		elif isinstance(value, str) and value.strip().upper() in cls.__members__:
			return cls[value.strip().upper()]
		msg = f"invalid rule level {value!r}, expected 0/1/2 or disabled/warning/error"
		raise ValueError(msg)


class Applicability(str, Enum):
	"""Whether a rule's condition must hold ("always") or must not hold ("never")."""

	ALWAYS = "always"
	NEVER = "never"


class RuleEntry(BaseModel):
	"""A single rule of the policy."""

	model_config = ConfigDict(frozen=True, extra="forbid")

	name: str
	severity: RuleLevel
	applicability: Applicability = Applicability.ALWAYS
	parameter: RuleParameter = None

	@field_validator("severity", mode="before")
	@classmethod
	def _parse_severity(cls, value: object) -> RuleLevel:
		return RuleLevel.parse(value)

	@field_validator("parameter", mode="before")
	@classmethod
	def _normalize_parameter(cls, value: object) -> object:
		if value is None:
			return None
		if isinstance(value, bool):
			msg = "boolean parameters are not supported"
			raise ValueError(msg)  # noqa: TRY004
		if isinstance(value, list | tuple):
			tokens = tuple(value)
			if not all(isinstance(token, str) for token in tokens):
				msg = "token lists may only contain strings"
				raise ValueError(msg)
			duplicates = sorted({token for token in tokens if tokens.count(token) > 1})
			if duplicates:
				msg = f"duplicate tokens: {', '.join(duplicates)}"
				raise ValueError(msg)
			return tokens
		if isinstance(value, int) and value < 0:
			msg = "length bounds must be non-negative"
			raise ValueError(msg)
		return value

	@model_validator(mode="after")
	def _check_parameter_kind(self) -> RuleEntry:
		kinds = RULE_PARAMETERS.get(self.name)
		if kinds is None:
			msg = f"unknown rule '{self.name}'"
			raise ValueError(msg)

		kind = self.parameter_kind
		if kind == ABSENT:
			if ABSENT not in kinds and self.is_active:
				msg = f"rule '{self.name}' requires a parameter"
				raise ValueError(msg)
		elif kind not in kinds:
			msg = f"rule '{self.name}' does not accept a {kind} parameter"
			raise ValueError(msg)

		if self.name in CASE_RULES and kind != ABSENT:
			names = self.parameter if isinstance(self.parameter, tuple) else (self.parameter,)
			unknown = [case for case in names if case not in CASE_NAMES]
			if unknown:
				msg = f"unknown case name(s) {', '.join(map(str, unknown))}"
				raise ValueError(msg)
		return self

	@classmethod
	def from_config(cls, name: str, raw: object) -> RuleEntry:
		"""
		Build an entry from its configuration form.

		Accepts the commitlint list form ``[level, applicability, value]``
		(trailing items optional) or a mapping with ``level``, ``rule`` and
		``value`` keys.

		Args:
		        name: Rule name
		        raw: List or mapping describing the rule

		Returns:
		        RuleEntry: The validated entry

		Raises:
		        ConfigMalformed: If the rule cannot be constructed

		"""
		if isinstance(raw, RuleEntry):
			if raw.name != name:
				msg = f"Rule entry '{raw.name}' registered under name '{name}'"
				raise ConfigMalformed(msg)
			return raw

		if isinstance(raw, list | tuple):
			if not 1 <= len(raw) <= _MAX_RULE_ITEMS:
				msg = f"Rule '{name}' must be [level, applicability, value], got {raw!r}"
				raise ConfigMalformed(msg)
			fields = dict(zip(("severity", "applicability", "parameter"), raw, strict=False))
		elif isinstance(raw, Mapping):
			fields = {}
			for key, value in raw.items():
				target = _FIELD_ALIASES.get(str(key))
				if target is None:
					msg = f"Rule '{name}' has unknown key '{key}'"
					raise ConfigMalformed(msg)
				fields[target] = value
		else:
			msg = f"Rule '{name}' must be a list or a mapping, got {type(raw).__name__}"
			raise ConfigMalformed(msg)

		try:
			return cls.model_validate({"name": name, **fields})
		except ValidationError as e:
			details = "; ".join(error["msg"] for error in e.errors())
			msg = f"Invalid rule '{name}': {details}"
			raise ConfigMalformed(msg) from e

	@property
	def parameter_kind(self) -> str:
		"""Which variant the parameter holds: tokens, bound, text or absent."""
		if self.parameter is None:
			return ABSENT
		if isinstance(self.parameter, tuple):
			return TOKENS
		if isinstance(self.parameter, int):
			return BOUND
		return TEXT

	@property
	def is_active(self) -> bool:
		"""Whether the rule is evaluated at all."""
		return self.severity > RuleLevel.DISABLED

	def to_commitlint(self) -> list[Any]:
		"""Return the commitlint list form of this entry."""
		if not self.is_active and self.parameter is None:
			return [int(self.severity)]
		shape: list[Any] = [int(self.severity), self.applicability.value]
		if isinstance(self.parameter, tuple):
			shape.append(list(self.parameter))
		elif self.parameter is not None:
			shape.append(self.parameter)
		return shape


@dataclass(frozen=True)
class PolicyDescriptor:
	"""
	Read-only mapping of rule name to rule entry.

	Attributes:
	        rules: The rule entries, keyed by name
	        extends: Presets this descriptor was layered on
	        source: Where the descriptor was loaded from, for diagnostics

	"""

	rules: Mapping[str, RuleEntry]
	extends: tuple[str, ...] = ()
	source: str | None = None

	def __post_init__(self) -> None:
		for name, entry in self.rules.items():
			if name != entry.name:
				msg = f"Rule entry '{entry.name}' registered under name '{name}'"
				raise ConfigMalformed(msg)
		object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))
		object.__setattr__(self, "extends", tuple(self.extends))

	@classmethod
	def from_mapping(
		cls,
		rules: Mapping[str, Any],
		extends: tuple[str, ...] | list[str] = (),
		source: str | None = None,
	) -> PolicyDescriptor:
		"""Build a descriptor from ``name -> [level, applicability, value]`` data."""
		if not isinstance(rules, Mapping):
			msg = f"'rules' must be a mapping, got {type(rules).__name__}"
			raise ConfigMalformed(msg)
		entries = {str(name): RuleEntry.from_config(str(name), raw) for name, raw in rules.items()}
		logger.debug("Built descriptor with %d rules from %s", len(entries), source or "<memory>")
		return cls(entries, tuple(extends), source)

	def get(self, name: str) -> RuleEntry | None:
		"""Return the entry for ``name`` or None."""
		return self.rules.get(name)

	def __getitem__(self, name: str) -> RuleEntry:
		return self.rules[name]

	def __contains__(self, name: object) -> bool:
		return name in self.rules

	def __iter__(self) -> Iterator[str]:
		return iter(self.rules)

	def __len__(self) -> int:
		return len(self.rules)

	def active_rules(self) -> list[RuleEntry]:
		"""Entries with a severity above disabled."""
		return [entry for entry in self.rules.values() if entry.is_active]

	def override(self, other: PolicyDescriptor) -> PolicyDescriptor:
		"""
		Layer ``other`` on top of this descriptor.

		Entries in ``other`` replace entries of the same name; the rest are kept.

		"""
		merged = dict(self.rules)
		merged.update(other.rules)
		return PolicyDescriptor(merged, extends=other.extends or self.extends, source=other.source or self.source)

	def to_commitlint(self) -> dict[str, Any]:
		"""Return a commitlint-compatible configuration mapping."""
		return {"rules": {name: entry.to_commitlint() for name, entry in sorted(self.rules.items())}}
