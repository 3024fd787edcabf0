"""
CLI entry point for diffhighlight.

This allows the tool to be run as:
    git diff | python -m diffhighlight
"""

import sys
from diffhighlight.cli import main

if __name__ == "__main__":
    sys.exit(main())
