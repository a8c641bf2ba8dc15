"""Output layer: layout translation and text rendering."""

from .renderer import MathRenderer, render, render_sympy
from .translator import LayoutTranslator

__all__ = ["MathRenderer", "render", "render_sympy", "LayoutTranslator"]
