"""Allow ``python -m mcpinstall``."""

import sys

from mcpinstall.cli import main

if __name__ == "__main__":
    sys.exit(main())
