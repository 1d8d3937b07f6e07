"""Render a descriptor as commitlint configuration for an external engine."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import yaml

from commitpolicy.errors import ConfigError

if TYPE_CHECKING:
	from pathlib import Path

	from .descriptor import PolicyDescriptor

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("json", "yaml")


def render_commitlint(descriptor: PolicyDescriptor, fmt: str = "json") -> str:
	"""
	Render the flattened descriptor in commitlint's configuration shape.

	The output carries every rule explicitly, so it does not depend on
	commitlint's own presets.

	Args:
	        descriptor: Descriptor to render
	        fmt: Either "json" or "yaml"

	Returns:
	        str: The rendered configuration, newline terminated

	"""
	data = descriptor.to_commitlint()
	if fmt == "json":
		return json.dumps(data, indent=2) + "\n"
	if fmt == "yaml":
		return yaml.safe_dump(data, default_flow_style=None, sort_keys=False)
	msg = f"Unsupported export format '{fmt}'. Choose one of: {', '.join(EXPORT_FORMATS)}"
	raise ValueError(msg)


def write_commitlint(descriptor: PolicyDescriptor, path: Path, fmt: str = "json") -> Path:
	"""
	Write the rendered configuration to ``path``.

	Raises:
	        ConfigError: If the file cannot be written

	"""
	content = render_commitlint(descriptor, fmt)
	try:
		path.parent.mkdir(parents=True, exist_ok=True)
		path.write_text(content, encoding="utf-8")
	except OSError as e:
		error_msg = f"Error writing commitlint configuration to {path}: {e}"
		logger.exception(error_msg)
		raise ConfigError(error_msg) from e
	logger.info("Commitlint configuration written to %s", path)
	return path
