"""Schema for the policy file."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from commitpolicy.config import DEFAULT_CONFIG


class LintSettingsSchema(BaseModel):
	"""The ``lint`` section."""

	model_config = ConfigDict(extra="forbid")

	ignore_defaults: bool = True
	ignores: list[str] = Field(default_factory=list)
	strict: bool = False
	help_url: str | None = DEFAULT_CONFIG["lint"]["help_url"]


class ExportSettingsSchema(BaseModel):
	"""The ``export`` section."""

	model_config = ConfigDict(extra="forbid")

	format: Literal["json", "yaml"] = "json"
	file_name: str | None = None


class PolicyFileSchema(BaseModel):
	"""
	Top-level layout of a policy file.

	``extends`` and ``rules`` are kept as loaded; the policy loader turns them
	into a descriptor and reports problems rule by rule.

	"""

	model_config = ConfigDict(extra="forbid")

	extends: Any = None
	rules: Any = None
	lint: LintSettingsSchema = Field(default_factory=LintSettingsSchema)
	export: ExportSettingsSchema = Field(default_factory=ExportSettingsSchema)
