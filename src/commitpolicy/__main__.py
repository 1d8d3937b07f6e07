"""Allow running commitpolicy with ``python -m commitpolicy``."""

import sys

from commitpolicy.cli import main

if __name__ == "__main__":
	sys.exit(main())
