"""Tests for the configuration loader."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from commitpolicy.config import DEFAULT_CONFIG
from commitpolicy.errors import ConfigError, ConfigMalformed
from commitpolicy.utils.config_loader import ConfigLoader
from tests.base import FileSystemTestBase


@pytest.mark.fs
class TestConfigLoader(FileSystemTestBase):
	"""Resolution, parsing and overrides of the configuration."""

	def test_defaults(self) -> None:
		"""Without any file the defaults apply."""
		loader = ConfigLoader(repo_root=self.temp_dir)
		assert loader.config_file is None
		assert loader.config == DEFAULT_CONFIG
		assert loader.get("extends") == ["headlamp"]
		assert loader.get("lint.strict") is False
		assert loader.get("lint.missing", "fallback") == "fallback"

	def test_defaults_are_not_shared(self) -> None:
		"""Changing a loaded config leaves the defaults untouched."""
		loader = ConfigLoader(repo_root=self.temp_dir)
		loader.config["lint"]["ignores"].append("wip")
		assert DEFAULT_CONFIG["lint"]["ignores"] == []

	def test_project_file(self) -> None:
		"""The project policy file is found and merged over the defaults."""
		path = self.write_policy("lint:\n  strict: true\n")
		loader = ConfigLoader(repo_root=self.temp_dir)
		assert loader.config_file == path
		settings = loader.get_lint_settings()
		assert settings["strict"] is True
		assert settings["ignore_defaults"] is True

	def test_current_directory_fallback(self) -> None:
		"""Without a repository root the working directory is searched."""
		self.write_policy("export:\n  format: yaml\n")
		loader = ConfigLoader()
		assert loader.get_export_settings()["format"] == "yaml"

	def test_xdg_file(self) -> None:
		"""The user-level file is used when the project has none."""
		xdg_file = self.temp_dir / "xdg" / "commitpolicy" / "config.yml"
		xdg_file.parent.mkdir(parents=True)
		xdg_file.write_text("lint:\n  help_url: https://example.org/commits\n", encoding="utf-8")
		loader = ConfigLoader(repo_root=self.temp_dir / "repo")
		assert loader.config_file == xdg_file
		assert loader.get("lint.help_url") == "https://example.org/commits"

	def test_missing_explicit_file(self) -> None:
		"""A missing explicit file falls back to the defaults."""
		loader = ConfigLoader(config_file=self.temp_dir / "nope.yml")
		assert loader.config_file == (self.temp_dir / "nope.yml").resolve()
		assert loader.config["lint"] == DEFAULT_CONFIG["lint"]

	def test_empty_file(self) -> None:
		"""An empty file is the same as no overrides."""
		self.write_policy("")
		assert ConfigLoader(repo_root=self.temp_dir).config == DEFAULT_CONFIG

	@pytest.mark.parametrize(
		("content", "error"),
		[
			("rules: [unclosed\n", "is not valid YAML"),
			("- just\n- a list\n", "does not contain a YAML mapping"),
			("lint:\n  strict: true\n  strict: false\n", "duplicate key 'strict'"),
		],
	)
	def test_malformed_file(self, content: str, error: str) -> None:
		"""Unparsable files raise ConfigMalformed."""
		self.write_policy(content)
		with pytest.raises(ConfigMalformed, match=error):
			ConfigLoader(repo_root=self.temp_dir)

	def test_unreadable_file(self) -> None:
		"""I/O errors while reading surface as ConfigError."""
		self.write_policy("lint: {}\n")
		with (
			patch.object(Path, "open", side_effect=PermissionError("denied")),
			pytest.raises(ConfigError, match="Error loading configuration"),
		):
			ConfigLoader(repo_root=self.temp_dir)

	@pytest.mark.parametrize(
		("content", "error"),
		[
			("lint: strict\n", "lint: Input should be a valid dictionary"),
			("lint:\n  strikt: true\n", "lint.strikt: Extra inputs are not permitted"),
			("lint:\n  ignores: '^WIP'\n", "lint.ignores: Input should be a valid list"),
			("export:\n  format: toml\n", "export.format"),
			("lnt:\n  strict: true\n", "lnt: Extra inputs are not permitted"),
		],
	)
	def test_invalid_settings(self, content: str, error: str) -> None:
		"""Settings with the wrong shape or unknown keys are rejected at load time."""
		self.write_policy(content)
		with pytest.raises(ConfigMalformed, match=f"Invalid configuration in .*{error}"):
			ConfigLoader(repo_root=self.temp_dir)

	def test_settings_are_coerced(self) -> None:
		"""Validated settings carry their declared types."""
		self.write_policy("lint:\n  strict: 'yes'\n")
		assert ConfigLoader(repo_root=self.temp_dir).get_lint_settings()["strict"] is True

	def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
		"""COMMITPOLICY_<SECTION>_<KEY> variables override settings with typed values."""
		monkeypatch.setenv("COMMITPOLICY_LINT_STRICT", "yes")
		monkeypatch.setenv("COMMITPOLICY_LINT_HELP_URL", "https://example.org")
		monkeypatch.setenv("COMMITPOLICY_EXPORT_FORMAT", "yaml")
		monkeypatch.setenv("COMMITPOLICY_RULES_TYPE_ENUM", "app")
		loader = ConfigLoader(repo_root=self.temp_dir)
		assert loader.get("lint.strict") is True
		assert loader.get("lint.help_url") == "https://example.org"
		assert loader.get("export.format") == "yaml"
		assert loader.get("rules") == {}

	def test_singleton(self) -> None:
		"""get_instance reuses the loader until asked to reload."""
		first = ConfigLoader.get_instance()
		assert ConfigLoader.get_instance() is first
		assert ConfigLoader.get_instance(reload=True) is not first
