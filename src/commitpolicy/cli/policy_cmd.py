"""Commands for inspecting, validating and exporting the commit policy."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from .cli_types import ConfigOpt, OutputOpt

if TYPE_CHECKING:
	from commitpolicy.policy import PolicyDescriptor
	from commitpolicy.utils.config_loader import ConfigLoader

logger = logging.getLogger(__name__)

policy_app = typer.Typer(help="Inspect, validate and export the commit policy.", no_args_is_help=True)

ActiveFlag = Annotated[bool, typer.Option("--active", "-a", help="Only show rules that are evaluated")]

FormatOpt = Annotated[
	str | None,
	typer.Option("--format", "-f", help="Export format: json or yaml (overrides config)"),
]


def _load(config: Path | None) -> tuple["ConfigLoader", "PolicyDescriptor"]:
	"""Load the effective descriptor, exiting with a diagnostic if it is malformed."""
	from commitpolicy.errors import ConfigError
	from commitpolicy.policy import load_policy
	from commitpolicy.utils.cli_utils import exit_with_error
	from commitpolicy.utils.config_loader import ConfigLoader
	from commitpolicy.utils.git_utils import validate_repo_path

	try:
		config_loader = ConfigLoader(config_file=config, repo_root=validate_repo_path(Path.cwd()))
		return config_loader, load_policy(config_loader)
	except ConfigError as e:
		exit_with_error("The commit policy could not be loaded.", exception=e)


def _format_parameter(value: object) -> str:
	if value is None:
		return "-"
	if isinstance(value, tuple):
		return ", ".join(value)
	return str(value)


@policy_app.command(name="show")
def show_command(config: ConfigOpt = None, active: ActiveFlag = False) -> None:
	"""Show the effective rules as a table."""
	from rich.console import Console
	from rich.table import Table

	_config_loader, descriptor = _load(config)

	table = Table(title=f"Commit policy ({descriptor.source})", show_lines=False)
	table.add_column("Rule", style="bold")
	table.add_column("Level")
	table.add_column("When")
	table.add_column("Parameter", overflow="fold")

	level_styles = {0: "dim", 1: "yellow", 2: "red"}
	entries = descriptor.active_rules() if active else list(descriptor.rules.values())
	for entry in sorted(entries, key=lambda item: item.name):
		table.add_row(
			entry.name,
			f"[{level_styles[entry.severity]}]{entry.severity.name.lower()}[/]",
			entry.applicability.value if entry.is_active else "-",
			_format_parameter(entry.parameter),
		)

	Console().print(table)


@policy_app.command(name="export")
def export_command(config: ConfigOpt = None, fmt: FormatOpt = None, output: OutputOpt = None) -> None:
	"""Export the policy as commitlint configuration."""
	from commitpolicy.errors import ConfigError
	from commitpolicy.policy.export import EXPORT_FORMATS, render_commitlint, write_commitlint
	from commitpolicy.utils.cli_utils import exit_with_error

	config_loader, descriptor = _load(config)
	settings = config_loader.get_export_settings()
	export_format = (fmt or settings["format"]).lower()
	if export_format not in EXPORT_FORMATS:
		msg = f"Unsupported format '{export_format}'. Choose one of: {', '.join(EXPORT_FORMATS)}"
		raise typer.BadParameter(msg, param_hint="--format")

	if output is None:
		typer.echo(render_commitlint(descriptor, export_format), nl=False)
		return

	file_name = settings.get("file_name") or f".commitlintrc.{export_format}"
	target = output / file_name if output.is_dir() else output
	try:
		write_commitlint(descriptor, target, export_format)
	except ConfigError as e:
		exit_with_error("Could not export the commit policy.", exception=e)
	typer.echo(f"Wrote {target}")


@policy_app.command(name="check")
def check_command(config: ConfigOpt = None) -> None:
	"""Validate the policy file and report what was loaded."""
	from commitpolicy.utils.cli_utils import exit_with_error

	if config is not None and not config.exists():
		exit_with_error(f"Policy file not found: {config}")

	_config_loader, descriptor = _load(config)
	typer.echo(
		f"Policy OK: {len(descriptor)} rules ({len(descriptor.active_rules())} active) from {descriptor.source}"
	)


def register_command(app: typer.Typer) -> None:
	"""Register the policy command group with the CLI app."""
	app.add_typer(policy_app, name="policy")
