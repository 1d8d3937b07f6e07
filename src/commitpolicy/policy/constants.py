"""Constants shared by the policy descriptor and the linter."""

from __future__ import annotations

# Commit areas used by the Headlamp project
HEADLAMP_TYPES = (
	"frontend",
	"backend",
	"app",
	"docs",
	"ci",
	"chore",
	"test",
	"refactor",
	"plugin",
	"plugins",
	"chart",
	"charts",
	"docker",
	"e2e",
	"i18n",
	"build",
	"release",
	"revert",
)

# Types of the conventional commits base preset
CONVENTIONAL_TYPES = (
	"build",
	"chore",
	"ci",
	"docs",
	"feat",
	"fix",
	"perf",
	"refactor",
	"revert",
	"style",
	"test",
)

CASE_NAMES = (
	"lower-case",
	"upper-case",
	"camel-case",
	"kebab-case",
	"pascal-case",
	"sentence-case",
	"snake-case",
	"start-case",
)

# Parameter kinds a rule accepts
TOKENS = "tokens"
BOUND = "bound"
TEXT = "text"
ABSENT = "absent"

# Rule name -> parameter kinds it accepts. A rule listing ABSENT needs no parameter.
RULE_PARAMETERS: dict[str, frozenset[str]] = {
	"type-enum": frozenset({TOKENS}),
	"type-case": frozenset({TEXT, TOKENS}),
	"type-empty": frozenset({ABSENT}),
	"scope-enum": frozenset({TOKENS}),
	"scope-case": frozenset({TEXT, TOKENS}),
	"scope-empty": frozenset({ABSENT}),
	"subject-case": frozenset({TEXT, TOKENS}),
	"subject-empty": frozenset({ABSENT}),
	"subject-full-stop": frozenset({TEXT}),
	"header-case": frozenset({TEXT, TOKENS}),
	"header-full-stop": frozenset({TEXT}),
	"header-max-length": frozenset({BOUND}),
	"header-min-length": frozenset({BOUND}),
	"header-trim": frozenset({ABSENT}),
	"body-leading-blank": frozenset({ABSENT}),
	"body-empty": frozenset({ABSENT}),
	"body-max-line-length": frozenset({BOUND}),
	"footer-leading-blank": frozenset({ABSENT}),
	"footer-empty": frozenset({ABSENT}),
	"footer-max-line-length": frozenset({BOUND}),
}

RULE_NAMES = frozenset(RULE_PARAMETERS)

# Rules whose parameter is a case name (or list of case names)
CASE_RULES = frozenset({"type-case", "scope-case", "subject-case", "header-case"})
