"""Load the effective policy descriptor from configuration and presets."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from commitpolicy.errors import ConfigMalformed
from commitpolicy.utils.config_loader import ConfigLoader

from .descriptor import PolicyDescriptor
from .presets import PRESETS

if TYPE_CHECKING:
	from pathlib import Path

logger = logging.getLogger(__name__)


def _as_preset_list(value: Any, where: str) -> list[str]:
	if value is None:
		return []
	if isinstance(value, str):
		return [value]
	if isinstance(value, list | tuple) and all(isinstance(item, str) for item in value):
		return list(value)
	msg = f"'extends' in {where} must be a preset name or a list of names, got {value!r}"
	raise ConfigMalformed(msg)


def resolve_preset(name: str, _chain: tuple[str, ...] = ()) -> PolicyDescriptor:
	"""
	Resolve a built-in preset, including the presets it extends.

	Args:
	        name: Preset name
	        _chain: Presets already being resolved, for cycle detection

	Returns:
	        PolicyDescriptor: The flattened preset

	Raises:
	        ConfigMalformed: If the preset is unknown or extends itself

	"""
	if name in _chain:
		msg = f"Preset cycle detected: {' -> '.join((*_chain, name))}"
		raise ConfigMalformed(msg)
	preset = PRESETS.get(name)
	if preset is None:
		msg = f"Unknown preset '{name}'. Available presets: {', '.join(sorted(PRESETS))}"
		raise ConfigMalformed(msg)

	chain = (*_chain, name)
	base = PolicyDescriptor({}, source=f"preset:{name}")
	for parent in _as_preset_list(preset.get("extends"), f"preset '{name}'"):
		base = base.override(resolve_preset(parent, chain))

	own = PolicyDescriptor.from_mapping(preset.get("rules", {}), source=f"preset:{name}")
	resolved = base.override(own)
	return PolicyDescriptor(resolved.rules, extends=(name,), source=f"preset:{name}")


def build_policy(
	rules: Any,
	extends: Any = None,
	source: str | None = None,
) -> PolicyDescriptor:
	"""
	Build a descriptor from local rules layered over the listed presets.

	Args:
	        rules: Mapping of rule name to rule configuration
	        extends: Preset name or list of preset names, applied in order
	        source: Origin of the data, for diagnostics

	Returns:
	        PolicyDescriptor: The effective descriptor

	"""
	where = source or "configuration"
	presets = _as_preset_list(extends, where)

	base = PolicyDescriptor({}, source=source)
	for preset in presets:
		base = base.override(resolve_preset(preset))

	local = PolicyDescriptor.from_mapping(rules or {}, extends=tuple(presets), source=source)
	return base.override(local)


def load_policy(
	config_loader: ConfigLoader | None = None,
	config_file: Path | None = None,
	repo_root: Path | None = None,
) -> PolicyDescriptor:
	"""
	Load the effective commit policy.

	The configuration's ``extends`` presets are resolved first and its
	``rules`` replace their entries by name. Without a policy file the
	built-in ``headlamp`` preset applies.

	Args:
	        config_loader: ConfigLoader to read from (recommended)
	        config_file: Policy file path, used when no loader is given
	        repo_root: Repository root, used when no loader is given

	Returns:
	        PolicyDescriptor: The loaded descriptor

	Raises:
	        ConfigMalformed: If the descriptor cannot be constructed

	"""
	if config_loader is None:
		config_loader = ConfigLoader(config_file=config_file, repo_root=repo_root)

	source = str(config_loader.config_file) if config_loader.config_file else "defaults"
	descriptor = build_policy(
		config_loader.get("rules", {}),
		extends=config_loader.get("extends"),
		source=source,
	)
	logger.debug(
		"Loaded policy from %s: %d rules, %d active",
		source,
		len(descriptor),
		len(descriptor.active_rules()),
	)
	return descriptor
