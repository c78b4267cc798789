"""
Module execution entry point.

Allows running with: python -m ctlog_cli
"""

import sys
from ctlog_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
