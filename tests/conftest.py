"""Global test fixtures and configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from commitpolicy.utils.config_loader import ConfigLoader

if TYPE_CHECKING:
	from collections.abc import Iterator
	from pathlib import Path


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
	"""
	Keep tests away from the developer's own configuration.

	Runs every test from an empty working directory, with no user-level
	config, no COMMITPOLICY_* variables and a fresh ConfigLoader singleton.

	"""
	for name in list(os.environ):
		if name.startswith("COMMITPOLICY_"):
			monkeypatch.delenv(name)
	xdg_home = tmp_path / "xdg"
	xdg_home.mkdir()
	monkeypatch.setattr("commitpolicy.utils.config_loader.xdg_config_home", str(xdg_home))
	monkeypatch.chdir(tmp_path)
	monkeypatch.setattr(ConfigLoader, "_instance", None)
	yield
