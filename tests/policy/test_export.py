"""Tests for exporting the policy as commitlint configuration."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
import yaml

from commitpolicy.errors import ConfigError
from commitpolicy.policy import resolve_preset
from commitpolicy.policy.export import render_commitlint, write_commitlint
from tests.base import FileSystemTestBase


@pytest.mark.unit
class TestRenderCommitlint:
	"""Rendering the descriptor in commitlint's shape."""

	def test_json(self) -> None:
		"""JSON output carries every rule in list form."""
		rendered = render_commitlint(resolve_preset("headlamp"), "json")
		data = json.loads(rendered)
		assert rendered.endswith("\n")
		assert data["rules"]["header-max-length"] == [2, "always", 72]
		assert data["rules"]["subject-empty"] == [2, "never"]
		assert data["rules"]["scope-case"] == [0]
		assert data["rules"]["type-enum"][2][-1] == "revert"

	def test_yaml(self) -> None:
		"""YAML output parses back to the same data as JSON."""
		descriptor = resolve_preset("headlamp")
		assert yaml.safe_load(render_commitlint(descriptor, "yaml")) == json.loads(render_commitlint(descriptor))

	def test_unknown_format(self) -> None:
		"""Unknown formats are rejected."""
		with pytest.raises(ValueError, match="Unsupported export format 'toml'"):
			render_commitlint(resolve_preset("headlamp"), "toml")


@pytest.mark.fs
class TestWriteCommitlint(FileSystemTestBase):
	"""Writing the rendered configuration to disk."""

	def test_write(self) -> None:
		"""Parent directories are created as needed."""
		target = self.temp_dir / "out" / ".commitlintrc.json"
		write_commitlint(resolve_preset("headlamp"), target)
		assert json.loads(target.read_text(encoding="utf-8"))["rules"]["type-case"] == [2, "always", "lower-case"]

	def test_write_failure(self) -> None:
		"""I/O errors surface as ConfigError."""
		target = self.temp_dir / ".commitlintrc.json"
		with (
			patch("pathlib.Path.write_text", side_effect=PermissionError("denied")),
			pytest.raises(ConfigError, match="Error writing commitlint configuration"),
		):
			write_commitlint(resolve_preset("headlamp"), target)
