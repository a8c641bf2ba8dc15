"""
Variable-height bracket glyphs.

A bracket is drawn in a column (or, for angled brackets, a band of
columns) next to content of a given height. Single-row content gets the
plain ASCII glyph, taller content gets a bracket assembled from the
Unicode bracket-piece block.
"""

from enum import Enum, auto

from .canvas import TextCanvas
from ..utils.errors import LayoutError


class BracketType(Enum):
    """Kinds of bracket a group or matrix can be enclosed in."""

    NONE = auto()
    LEFT_ROUND = auto()
    RIGHT_ROUND = auto()
    LEFT_SQUARE = auto()
    RIGHT_SQUARE = auto()
    LEFT_CURLY = auto()
    RIGHT_CURLY = auto()
    LEFT_ANGLED = auto()
    RIGHT_ANGLED = auto()
    VERTICAL = auto()


# Glyph used when the content is a single row (or empty)
SINGLE_GLYPHS = {
    BracketType.LEFT_ROUND: "(",
    BracketType.RIGHT_ROUND: ")",
    BracketType.LEFT_SQUARE: "[",
    BracketType.RIGHT_SQUARE: "]",
    BracketType.LEFT_CURLY: "{",
    BracketType.RIGHT_CURLY: "}",
    BracketType.LEFT_ANGLED: "⟨",
    BracketType.RIGHT_ANGLED: "⟩",
    BracketType.VERTICAL: "|",
}

# Hand-picked (top, bottom) pairs for two-row content
DOUBLE_GLYPHS = {
    BracketType.LEFT_ROUND: ("⎛", "⎝"),
    BracketType.RIGHT_ROUND: ("⎞", "⎠"),
    BracketType.LEFT_SQUARE: ("⎡", "⎣"),
    BracketType.RIGHT_SQUARE: ("⎤", "⎦"),
    BracketType.LEFT_CURLY: ("⎰", "⎱"),
    BracketType.RIGHT_CURLY: ("⎱", "⎰"),
}

# (top, extension, bottom) for three rows and more
TALL_GLYPHS = {
    BracketType.LEFT_ROUND: ("⎛", "⎜", "⎝"),
    BracketType.RIGHT_ROUND: ("⎞", "⎟", "⎠"),
    BracketType.LEFT_SQUARE: ("⎡", "⎢", "⎣"),
    BracketType.RIGHT_SQUARE: ("⎤", "⎥", "⎦"),
    BracketType.LEFT_CURLY: ("⎧", "⎪", "⎩"),
    BracketType.RIGHT_CURLY: ("⎫", "⎪", "⎭"),
}

# Waist piece of a tall curly brace
CURLY_MIDDLE = {
    BracketType.LEFT_CURLY: "⎨",
    BracketType.RIGHT_CURLY: "⎬",
}

TALL_VERTICAL = "￨"
RISING = "╱"
FALLING = "╲"
LEFT_POINT = "\U0001FBA4"
RIGHT_POINT = "\U0001FBA5"


def bracket_width(kind: BracketType, content_height: int) -> int:
    """Columns a bracket of this kind needs beside content of given height."""
    if kind is BracketType.NONE:
        return 0
    if content_height == 0:
        return 1
    if kind in (BracketType.LEFT_ANGLED, BracketType.RIGHT_ANGLED):
        return (content_height + 1) // 2
    return 1


def draw_bracket(
    canvas: TextCanvas, kind: BracketType, content_height: int, x: int, y: int
) -> None:
    """
    Paint a bracket whose top-left corner is at (x, y).

    The bracket spans max(content_height, 1) rows and
    bracket_width(kind, content_height) columns.

    Raises:
        LayoutError: If the kind is not a BracketType.
        CanvasBoundsError: If the bracket does not fit the canvas.
    """
    if kind is BracketType.NONE:
        return
    if not isinstance(kind, BracketType):
        raise LayoutError(f"Unknown bracket kind: {kind!r}")

    if content_height <= 1:
        canvas.set(x, y, SINGLE_GLYPHS[kind])
    elif kind in (BracketType.LEFT_ANGLED, BracketType.RIGHT_ANGLED):
        _draw_angled(canvas, kind, content_height, x, y)
    elif kind is BracketType.VERTICAL:
        for row in range(content_height):
            canvas.set(x, y + row, TALL_VERTICAL)
    elif content_height == 2:
        top, bottom = DOUBLE_GLYPHS[kind]
        canvas.set(x, y, top)
        canvas.set(x, y + 1, bottom)
    else:
        top, extension, bottom = TALL_GLYPHS[kind]
        canvas.set(x, y, top)
        for row in range(1, content_height - 1):
            canvas.set(x, y + row, extension)
        canvas.set(x, y + content_height - 1, bottom)
        if kind in CURLY_MIDDLE:
            canvas.set(x, y + content_height // 2, CURLY_MIDDLE[kind])


def _draw_angled(
    canvas: TextCanvas, kind: BracketType, height: int, x: int, y: int
) -> None:
    """Angled brackets are two diagonals meeting at the middle row."""
    half = height // 2
    left = kind is BracketType.LEFT_ANGLED

    if height % 2 == 0:
        for row in range(half):
            if left:
                canvas.set(x + half - 1 - row, y + row, RISING)
                canvas.set(x + row, y + half + row, FALLING)
            else:
                canvas.set(x + row, y + row, FALLING)
                canvas.set(x + half - 1 - row, y + half + row, RISING)
        return

    # Odd heights put a point glyph in the outermost column of the centre row
    for row in range(half):
        if left:
            canvas.set(x + half - row, y + row, RISING)
            canvas.set(x + 1 + row, y + half + 1 + row, FALLING)
        else:
            canvas.set(x + row, y + row, FALLING)
            canvas.set(x + half - 1 - row, y + half + 1 + row, RISING)
    if left:
        canvas.set(x, y + half, LEFT_POINT)
    else:
        canvas.set(x + half, y + half, RIGHT_POINT)
