#!/usr/bin/env python3
"""
Main entry point for the MangaCross feed builder.

Sets up the module path so the project can be run from a checkout with
``python main.py -c config.json -o public``.
"""

import sys
from pathlib import Path

# Add the project root to Python path to enable imports
project_root = Path(__file__).parent.absolute()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


def main():
    """Run the command-line interface."""
    from cli import main as cli_main
    sys.exit(cli_main())


if __name__ == "__main__":
    main()
