"""
Configuration loader for commitpolicy.

This module provides functionality for loading and managing
configuration settings.

"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, TypeVar, cast

import yaml
from pydantic import ValidationError
from xdg.BaseDirectory import xdg_config_home

from commitpolicy.config import DEFAULT_CONFIG, POLICY_FILE_NAME
from commitpolicy.config_schema import PolicyFileSchema
from commitpolicy.errors import ConfigError, ConfigMalformed

# Set up logger
logger = logging.getLogger(__name__)

# Type variable for config values with better type safety
T = TypeVar("T")

# Constant for minimum number of parts in environment variable
MIN_ENV_VAR_PARTS = 2

ENV_PREFIX = "COMMITPOLICY_"

# Sections that environment variables may override; rules are file-only
ENV_SECTIONS = ("lint", "export")


class _UniqueKeyLoader(yaml.SafeLoader):
	"""SafeLoader that rejects duplicate mapping keys instead of keeping the last one."""

	def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[Any, Any]:
		seen: set[Any] = set()
		for key_node, _value_node in node.value:
			key = self.construct_object(key_node, deep=deep)
			if key in seen:
				raise yaml.constructor.ConstructorError(
					"while constructing a mapping",
					node.start_mark,
					f"found duplicate key {key!r}",
					key_node.start_mark,
				)
			seen.add(key)
		return super().construct_mapping(node, deep=deep)


class ConfigLoader:
	"""
	Loads and manages configuration for commitpolicy.

	This class handles loading configuration from files, environment
	variables, and default values, with proper error handling and path
	resolution.

	"""

	_instance = None  # For singleton pattern

	@classmethod
	def get_instance(
		cls, config_file: str | Path | None = None, reload: bool = False, repo_root: Path | None = None
	) -> "ConfigLoader":
		"""
		Get the singleton instance of ConfigLoader.

		Args:
		        config_file: Path to configuration file (optional)
		        reload: Whether to reload config even if already loaded
		        repo_root: Repository root path (optional)

		Returns:
		        ConfigLoader: Singleton instance

		"""
		if cls._instance is None or reload:
			cls._instance = cls(config_file, repo_root=repo_root)
		return cls._instance

	def __init__(self, config_file: str | Path | None = None, repo_root: Path | None = None) -> None:
		"""
		Initialize the configuration loader.

		Args:
		        config_file: Path to configuration file (optional)
		        repo_root: Repository root path (optional)

		"""
		self.config: dict[str, Any] = {}
		self.repo_root = repo_root
		self.config_file = self._resolve_config_file(config_file)
		self.load_config()

	def _resolve_config_file(self, config_file: str | Path | None = None) -> Path | None:
		"""
		Resolve the configuration file path.

		If a config file is specified, use that. Otherwise, look in standard locations:
		1. .commitpolicy.yml in the repository root (or the current directory)
		2. $XDG_CONFIG_HOME/commitpolicy/config.yml

		Args:
		        config_file: Explicitly provided config file path (optional)

		Returns:
		        Optional[Path]: Resolved config file path or None if no suitable file found

		"""
		if config_file:
			path = Path(config_file).expanduser().resolve()
			if not path.exists():
				logger.warning("Specified config file not found: %s", path)
			return path  # Return it anyway, we'll handle the missing file in load_config

		# Try the project root
		local_config = (self.repo_root or Path()) / POLICY_FILE_NAME
		if local_config.exists():
			return local_config

		# Try XDG config path
		xdg_config_file = Path(xdg_config_home) / "commitpolicy" / "config.yml"
		if xdg_config_file.exists():
			return xdg_config_file

		# If we get here, no config file was found
		return None

	@staticmethod
	def _parse_yaml_file(file_path: Path) -> dict[str, Any]:
		"""
		Parse a YAML policy file.

		Args:
		        file_path: Path to the YAML file to parse

		Returns:
		        Parsed YAML content as a dictionary

		Raises:
		        ConfigMalformed: If the file is not valid YAML or not a mapping

		"""
		with file_path.open(encoding="utf-8") as f:
			try:
				content = yaml.load(f, Loader=_UniqueKeyLoader)  # noqa: S506
			except yaml.YAMLError as e:
				msg = f"Configuration file {file_path} is not valid YAML: {e}"
				raise ConfigMalformed(msg) from e
		if content is None:  # Empty file
			return {}
		if not isinstance(content, dict):
			msg = f"Configuration file {file_path} does not contain a YAML mapping"
			raise ConfigMalformed(msg)
		return content

	def load_config(self) -> dict[str, Any]:
		"""
		Load configuration from file and apply environment variable overrides.

		Returns:
		        Dict[str, Any]: Loaded configuration

		Raises:
		        ConfigMalformed: If the configuration file cannot be parsed
		        ConfigError: If the configuration file exists but cannot be read

		"""
		# Start with default configuration
		self.config = copy.deepcopy(DEFAULT_CONFIG)

		if self.config_file:
			try:
				if self.config_file.exists():
					file_config = self._parse_yaml_file(self.config_file)
					self._merge_configs(self.config, file_config)
					logger.info("Loaded configuration from %s", self.config_file)
				else:
					logger.warning("Configuration file not found: %s", self.config_file)
			except OSError as e:
				error_msg = f"Error loading configuration from {self.config_file}: {e}"
				logger.exception(error_msg)
				raise ConfigError(error_msg) from e
		else:
			logger.debug("No configuration file found. Using default configuration.")

		# Apply environment variable overrides
		self._apply_env_overrides()
		self._validate()

		return self.config

	def _validate(self) -> None:
		"""
		Check the merged configuration against the policy file schema.

		The ``lint`` and ``export`` sections are replaced by their validated,
		type-coerced values.

		Raises:
		        ConfigMalformed: If a section has the wrong shape or an unknown key

		"""
		try:
			schema = PolicyFileSchema.model_validate(self.config)
		except ValidationError as e:
			details = "; ".join(f"{'.'.join(map(str, error['loc']))}: {error['msg']}" for error in e.errors())
			msg = f"Invalid configuration in {self.config_file or 'environment'}: {details}"
			raise ConfigMalformed(msg) from e
		self.config["lint"] = schema.lint.model_dump()
		self.config["export"] = schema.export.model_dump()

	def _merge_configs(self, base: dict[str, Any], override: dict[str, Any]) -> None:
		"""
		Recursively merge two configuration dictionaries.

		Args:
		        base: Base configuration dictionary to merge into
		        override: Override configuration to apply

		"""
		for key, value in override.items():
			if isinstance(value, dict) and key in base and isinstance(base[key], dict):
				self._merge_configs(base[key], value)
			else:
				base[key] = value

	def _apply_env_overrides(self) -> None:
		"""Apply environment variable overrides to configuration."""
		# Look for environment variables in the form COMMITPOLICY_SECTION_KEY
		for env_var, value in os.environ.items():
			if not env_var.startswith(ENV_PREFIX):
				continue
			parts = env_var.lower().split("_")[1:]
			if len(parts) < MIN_ENV_VAR_PARTS:
				continue
			section, key = parts[0], "_".join(parts[1:])
			if section not in ENV_SECTIONS:
				logger.debug("Ignoring environment override %s: unsupported section", env_var)
				continue

			# Try to convert value to appropriate type
			typed_value: Any
			if value.lower() in ("true", "yes", "1"):
				typed_value = True
			elif value.lower() in ("false", "no", "0"):
				typed_value = False
			else:
				try:
					typed_value = int(value)
				except ValueError:
					try:
						typed_value = float(value)
					except ValueError:
						typed_value = value

			section_config = self.config.setdefault(section, {})
			if not isinstance(section_config, dict):
				# Reported by _validate
				continue
			section_config[key] = typed_value
			logger.debug("Applied environment override %s: %s", env_var, typed_value)

	def get(self, key: str, default: T = None) -> T:
		"""
		Get a configuration value, optionally with a section.

		Examples:
		        # Get a top-level key
		        config.get("lint")

		        # Get a nested key with dot notation
		        config.get("lint.strict")

		Args:
		        key: Configuration key, can include dots for nested access
		        default: Default value if key not found

		Returns:
		        T: Configuration value or default

		"""
		current: Any = self.config
		for part in key.split("."):
			if isinstance(current, dict) and part in current:
				current = current[part]
			else:
				return default

		return cast("T", current)

	def _get_section(self, section: str) -> dict[str, Any]:
		"""Return a settings section merged over its defaults."""
		settings = dict(DEFAULT_CONFIG[section])
		settings.update(self.get(section, {}) or {})
		return settings

	def get_lint_settings(self) -> dict[str, Any]:
		"""
		Get linting behaviour settings.

		Returns:
		        Dict[str, Any]: The ``lint`` section merged over its defaults

		"""
		return self._get_section("lint")

	def get_export_settings(self) -> dict[str, Any]:
		"""
		Get export command settings.

		Returns:
		        Dict[str, Any]: The ``export`` section merged over its defaults

		"""
		return self._get_section("export")
