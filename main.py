#!/usr/bin/env python3
"""
mathcanvas - AsciiMath expressions rendered as plain text.

Entry point for running from a source checkout.

Usage:
    python main.py "1/2"                # Print the layout of an expression
    python main.py "root(3)(1/4)"       # Cube root over a fraction
"""

import sys
import os

# Add the checkout to path for imports
sys.path.insert(0, os.path.dirname(__file__))

from mathcanvas.cli import main  # noqa: E402


if __name__ == "__main__":
    sys.exit(main() or 0)
