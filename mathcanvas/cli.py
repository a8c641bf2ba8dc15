"""
Command-line interface.

Usage:
    mathcanvas "sqrt(1/2)"          # Print the layout of an expression
    mathcanvas "[(a,b),(c,d)]"      # Matrices, fractions, roots, scripts
"""

import argparse
import sys
from typing import List, Optional

from .utils.errors import RenderError, format_error_for_user


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mathcanvas",
        description="Render AsciiMath expressions as multi-line plain text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mathcanvas "1/2"                    Fraction with a horizontal rule
  mathcanvas "sqrt(x^2+1)"            Radical over a superscript
  mathcanvas "sum_(i=1)^n i"          Stacked limits
  mathcanvas "[(1,2),(3,4)]"          Bracketed matrix
        """,
    )

    # Positional: expression to render
    parser.add_argument(
        "expression",
        help="AsciiMath markup (quote it so the shell leaves it alone)",
    )

    return parser


def render_cli(expression: str) -> int:
    """Render an expression and print the result."""
    from .output.renderer import render

    try:
        rendered = render(expression)
    except RenderError as e:
        print(f"Error: {format_error_for_user(e)}", file=sys.stderr)
        return 1

    print(rendered)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    return render_cli(args.expression)


if __name__ == "__main__":
    sys.exit(main())
