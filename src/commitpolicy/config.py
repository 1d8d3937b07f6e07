"""Default configuration settings for the commitpolicy tool."""

# Policy file looked up at the project root
POLICY_FILE_NAME = ".commitpolicy.yml"

DEFAULT_CONFIG = {
	# Presets whose rules are loaded before the local ones
	"extends": ["headlamp"],
	# Local rule overrides, in commitlint shape: name -> [level, applicability, value]
	"rules": {},
	# Linting behaviour
	"lint": {
		# Skip merge, revert, fixup! and squash! messages
		"ignore_defaults": True,
		# Extra regular expressions; a matching message is not linted
		"ignores": [],
		# Treat warnings as failures
		"strict": False,
		# Shown below the diagnostics when a message is rejected
		"help_url": "https://headlamp.dev/docs/latest/contributing#2-follow-commit-guidelines",
	},
	# Export command settings
	"export": {
		# Output format: 'json' or 'yaml'
		"format": "json",
		# File name used when --output is a directory; defaults to .commitlintrc.<format>
		"file_name": None,
	},
}
