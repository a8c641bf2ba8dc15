"""mathcanvas: AsciiMath and SymPy expressions laid out as multi-line text."""

from .output.renderer import MathRenderer, render, render_sympy

__version__ = "0.1.0"

__all__ = ["MathRenderer", "render", "render_sympy"]
