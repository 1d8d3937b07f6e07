"""
Commit policy package.

Defines the policy descriptor, the built-in presets and the functions that
load the effective descriptor from configuration.

"""

from .constants import CONVENTIONAL_TYPES, HEADLAMP_TYPES, RULE_NAMES
from .descriptor import Applicability, PolicyDescriptor, RuleEntry, RuleLevel, RuleParameter
from .loader import build_policy, load_policy, resolve_preset
from .presets import PRESETS

__all__ = [
	"CONVENTIONAL_TYPES",
	"HEADLAMP_TYPES",
	"PRESETS",
	"RULE_NAMES",
	"Applicability",
	"PolicyDescriptor",
	"RuleEntry",
	"RuleLevel",
	"RuleParameter",
	"build_policy",
	"load_policy",
	"resolve_preset",
]
