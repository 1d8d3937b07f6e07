"""
Built-in policy presets.

Presets use the same literal shape as a policy file: an optional
``extends`` list and a ``rules`` mapping of ``name -> [level, applicability,
value]``.

"""

from __future__ import annotations

from typing import Any

from .constants import CONVENTIONAL_TYPES, HEADLAMP_TYPES

CONVENTIONAL_PRESET: dict[str, Any] = {
	"extends": [],
	"rules": {
		"body-leading-blank": [1, "always"],
		"body-max-line-length": [2, "always", 100],
		"footer-leading-blank": [1, "always"],
		"footer-max-line-length": [2, "always", 100],
		"header-max-length": [2, "always", 100],
		"header-trim": [2, "always"],
		"subject-case": [2, "never", ["sentence-case", "start-case", "pascal-case", "upper-case"]],
		"subject-empty": [2, "never"],
		"subject-full-stop": [2, "never", "."],
		"type-case": [2, "always", "lower-case"],
		"type-empty": [2, "never"],
		"type-enum": [2, "always", list(CONVENTIONAL_TYPES)],
	},
}

# Format: <area>: <description of changes>
# e.g. "frontend: HomeButton: Fix so it navigates to home"
HEADLAMP_PRESET: dict[str, Any] = {
	"extends": ["conventional"],
	"rules": {
		"type-enum": [2, "always", list(HEADLAMP_TYPES)],
		# Mixed case is common in subjects
		"subject-case": [0],
		"subject-empty": [2, "never"],
		"type-case": [2, "always", "lower-case"],
		"type-empty": [2, "never"],
		# Component names such as "HomeButton"
		"scope-case": [0],
		"header-max-length": [2, "always", 72],
		"body-max-line-length": [2, "always", 72],
		# URLs and references run long
		"footer-max-line-length": [0],
	},
}

PRESETS: dict[str, dict[str, Any]] = {
	"conventional": CONVENTIONAL_PRESET,
	"headlamp": HEADLAMP_PRESET,
}
