#!/usr/bin/env python3
"""Launch the interactive user store menu.

Usage:
    ./start_cli.py                  # Start menu with bundled config
    ./start_cli.py --lenient-batch  # Don't check declared batch sizes
    ./start_cli.py --log-level DEBUG
"""

import sys

from userstore.cli import main


if __name__ == "__main__":
    sys.exit(main())
