"""Layout layer: canvas, brackets, and layout nodes."""

from .brackets import BracketType, bracket_width, draw_bracket
from .canvas import TextCanvas
from .nodes import (
    Drawable,
    Fraction,
    Group,
    IndexedRoot,
    Literal,
    Matrix,
    Radical,
    Row,
    ScriptedNode,
    StackedPair,
    scripted,
)

__all__ = [
    "BracketType",
    "bracket_width",
    "draw_bracket",
    "TextCanvas",
    "Drawable",
    "Fraction",
    "Group",
    "IndexedRoot",
    "Literal",
    "Matrix",
    "Radical",
    "Row",
    "ScriptedNode",
    "StackedPair",
    "scripted",
]
