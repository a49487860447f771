"""Allow running check-commit with `python -m checkcommit`."""

import sys

from checkcommit.cli import main

if __name__ == "__main__":
	sys.exit(main())
