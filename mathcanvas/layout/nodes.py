"""
Layout nodes.

Each node knows its own bounding box (width and height in cells), its
level (the row its optical centre sits on, counted from the top) and how
to paint itself into a freshly allocated TextCanvas. Parents only ever
query their children and blit the child canvases; they never look inside
them.

Nodes are immutable. Building a tree is cheap, painting allocates one
canvas per node per call.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple

import regex

from .brackets import BracketType, bracket_width, draw_bracket
from .canvas import TextCanvas
from ..utils.errors import LayoutError, MalformedMatrixError

RULE = "─"
OVERBAR = "▁"
RISING = "╱"
FALLING = "╲"

_GRAPHEME = regex.compile(r"\X")


def graphemes(text: str) -> list:
    """Split text into user-perceived characters (extended grapheme clusters)."""
    return _GRAPHEME.findall(text)


class Drawable(ABC):
    """
    Abstract base class for layout nodes.

    Subclasses must implement width, height, level and to_canvas.
    The invariant level() < height() holds whenever height() > 0.
    """

    @abstractmethod
    def width(self) -> int:
        """Number of columns the node occupies."""
        pass

    @abstractmethod
    def height(self) -> int:
        """Number of rows the node occupies."""
        pass

    @abstractmethod
    def level(self) -> int:
        """Row, from the top, that lines up with neighbouring nodes."""
        pass

    @abstractmethod
    def to_canvas(self) -> TextCanvas:
        """Paint the node into a new canvas of exactly width x height."""
        pass

    def as_text(self) -> str:
        """Render the node to its final multi-line string."""
        return self.to_canvas().to_string()


@dataclass(frozen=True)
class Literal(Drawable):
    """A single row of text."""

    text: str

    def units(self) -> list:
        return graphemes(self.text)

    def width(self) -> int:
        return len(self.units())

    def height(self) -> int:
        return 1

    def level(self) -> int:
        return 0

    def to_canvas(self) -> TextCanvas:
        units = self.units()
        canvas = TextCanvas(len(units), 1)
        for x, unit in enumerate(units):
            canvas.set(x, 0, unit)
        return canvas


@dataclass(frozen=True)
class Row(Drawable):
    """Children laid out left to right, aligned on their levels."""

    children: Tuple[Drawable, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "children", tuple(self.children))

    def width(self) -> int:
        return sum(child.width() for child in self.children)

    def height(self) -> int:
        if not self.children:
            return 0
        below = max(child.height() - child.level() - 1 for child in self.children)
        return self.level() + below + 1

    def level(self) -> int:
        return max((child.level() for child in self.children), default=0)

    def to_canvas(self) -> TextCanvas:
        canvas = TextCanvas(self.width(), self.height())
        level = self.level()
        x = 0
        for child in self.children:
            canvas.draw(child.to_canvas(), x, level - child.level())
            x += child.width()
        return canvas


def _centre(outer: int, inner: int) -> int:
    """Left offset that centres inner in outer, odd slack going left."""
    return (outer - inner + 1) // 2


@dataclass(frozen=True)
class Fraction(Drawable):
    """Numerator over denominator, separated by a full-width rule."""

    numerator: Drawable
    denominator: Drawable

    def width(self) -> int:
        return max(self.numerator.width(), self.denominator.width()) + 2

    def height(self) -> int:
        return self.numerator.height() + self.denominator.height() + 1

    def level(self) -> int:
        return self.numerator.height()

    def to_canvas(self) -> TextCanvas:
        width = self.width()
        rule_row = self.numerator.height()
        canvas = TextCanvas(width, self.height())

        canvas.draw(
            self.numerator.to_canvas(), _centre(width, self.numerator.width()), 0
        )
        for x in range(width):
            canvas.set(x, rule_row, RULE)
        canvas.draw(
            self.denominator.to_canvas(),
            _centre(width, self.denominator.width()),
            rule_row + 1,
        )
        return canvas


@dataclass(frozen=True)
class StackedPair(Drawable):
    """Top node directly over bottom node, no rule."""

    top: Drawable
    bottom: Drawable

    def width(self) -> int:
        return max(self.top.width(), self.bottom.width())

    def height(self) -> int:
        return self.top.height() + self.bottom.height()

    def level(self) -> int:
        return max(0, self.top.height() - 1)

    def to_canvas(self) -> TextCanvas:
        width = self.width()
        canvas = TextCanvas(width, self.height())
        canvas.draw(self.top.to_canvas(), _centre(width, self.top.width()), 0)
        canvas.draw(
            self.bottom.to_canvas(),
            _centre(width, self.bottom.width()),
            self.top.height(),
        )
        return canvas


@dataclass(frozen=True)
class Group(Drawable):
    """
    Inner node between a left and a right bracket.

    The brackets grow with the inner node. A group without an inner node
    (or with one that has no rows) is a bare bracket pair, as in "f()".
    """

    left: BracketType
    inner: Optional[Drawable]
    right: BracketType

    def _inner(self) -> Optional[Drawable]:
        if self.inner is None or self.inner.height() == 0:
            return None
        return self.inner

    def _content_height(self) -> int:
        inner = self._inner()
        return inner.height() if inner is not None else 0

    def width(self) -> int:
        inner = self._inner()
        h = self._content_height()
        inner_width = inner.width() if inner is not None else 0
        return bracket_width(self.left, h) + inner_width + bracket_width(self.right, h)

    def height(self) -> int:
        return self._content_height() or 1

    def level(self) -> int:
        return self._content_height() // 2

    def to_canvas(self) -> TextCanvas:
        inner = self._inner()
        h = self._content_height()
        canvas = TextCanvas(self.width(), self.height())

        x = bracket_width(self.left, h)
        draw_bracket(canvas, self.left, h, 0, 0)
        if inner is not None:
            canvas.draw(inner.to_canvas(), x, 0)
            x += inner.width()
        draw_bracket(canvas, self.right, h, x, 0)
        return canvas


@dataclass(frozen=True)
class Matrix(Drawable):
    """
    Grid of cells in row-major order between two full-height brackets.

    Raises:
        MalformedMatrixError: If num_cols is not positive or the cells do
            not fill a whole number of rows.
    """

    left: BracketType
    cells: Tuple[Drawable, ...]
    right: BracketType
    num_cols: int

    def __post_init__(self):
        object.__setattr__(self, "cells", tuple(self.cells))
        if self.num_cols <= 0 or len(self.cells) % self.num_cols != 0:
            raise MalformedMatrixError(len(self.cells), self.num_cols)

    def _rows(self):
        n = self.num_cols
        return [self.cells[i : i + n] for i in range(0, len(self.cells), n)]

    def _column_widths(self):
        widths = [0] * self.num_cols
        for row in self._rows():
            for col, cell in enumerate(row):
                widths[col] = max(widths[col], cell.width())
        return widths

    def _row_heights(self):
        return [max((cell.height() for cell in row), default=0) for row in self._rows()]

    def _bracket_columns(self, kind: BracketType, height: int) -> int:
        return max(1, bracket_width(kind, height))

    def width(self) -> int:
        h = self.height()
        widths = self._column_widths()
        return (
            self._bracket_columns(self.left, h)
            + sum(widths)
            + (len(widths) - 1)
            + self._bracket_columns(self.right, h)
        )

    def height(self) -> int:
        heights = self._row_heights()
        return sum(heights) + max(len(heights) - 1, 0)

    def level(self) -> int:
        return 0

    def to_canvas(self) -> TextCanvas:
        h = self.height()
        widths = self._column_widths()
        heights = self._row_heights()
        canvas = TextCanvas(self.width(), h)
        if h == 0:
            return canvas

        left_columns = self._bracket_columns(self.left, h)
        draw_bracket(canvas, self.left, h, 0, 0)

        y = 0
        for row, row_height in zip(self._rows(), heights):
            x = left_columns
            for cell, col_width in zip(row, widths):
                canvas.draw(cell.to_canvas(), x + (col_width - cell.width()) // 2, y)
                x += col_width + 1
            y += row_height + 1

        right_x = left_columns + sum(widths) + len(widths) - 1
        draw_bracket(canvas, self.right, h, right_x, 0)
        return canvas


@dataclass(frozen=True)
class ScriptedNode(Drawable):
    """Base with a subscript, a superscript or both, stacked to its right."""

    base: Drawable
    sub: Optional[Drawable] = None
    sup: Optional[Drawable] = None

    def __post_init__(self):
        if self.sub is None and self.sup is None:
            raise LayoutError("ScriptedNode needs a subscript or a superscript")

    def _sup_height(self) -> int:
        return self.sup.height() if self.sup is not None else 0

    def _sub_height(self) -> int:
        return self.sub.height() if self.sub is not None else 0

    def width(self) -> int:
        scripts = [s.width() for s in (self.sub, self.sup) if s is not None]
        return self.base.width() + max(scripts)

    def height(self) -> int:
        return self.base.height() + self._sup_height() + self._sub_height()

    def level(self) -> int:
        return self.base.level() + self._sup_height()

    def to_canvas(self) -> TextCanvas:
        canvas = TextCanvas(self.width(), self.height())
        base_width = self.base.width()
        base_y = self._sup_height()

        if self.sup is not None:
            canvas.draw(self.sup.to_canvas(), base_width, 0)
        canvas.draw(self.base.to_canvas(), 0, base_y)
        if self.sub is not None:
            canvas.draw(self.sub.to_canvas(), base_width, base_y + self.base.height())
        return canvas


def scripted(
    base: Drawable, sub: Optional[Drawable] = None, sup: Optional[Drawable] = None
) -> Drawable:
    """Attach scripts to base, or return base unchanged when there are none."""
    if sub is None and sup is None:
        return base
    return ScriptedNode(base, sub, sup)


@dataclass(frozen=True)
class Radical(Drawable):
    """Square root: a diagonal tick, a long rising stroke and an overbar."""

    radicand: Drawable

    def _tick(self) -> int:
        return (self.radicand.height() + 1) // 2

    def width(self) -> int:
        return self.radicand.width() + self.radicand.height() + self._tick()

    def height(self) -> int:
        return self.radicand.height() + 1

    def level(self) -> int:
        return self._tick()

    def to_canvas(self) -> TextCanvas:
        h = self.radicand.height()
        w = self.radicand.width()
        tick = self._tick()
        height = self.height()
        width = self.width()
        canvas = TextCanvas(width, height)

        # Falling tick ends on the bottom row where the rising stroke starts
        for pos in range(tick):
            canvas.set(pos, height - tick + pos, FALLING)
        for pos in range(h):
            canvas.set(tick + pos, height - 1 - pos, RISING)
        for x in range(tick + h, width):
            canvas.set(x, 0, OVERBAR)

        canvas.draw(self.radicand.to_canvas(), width - w, 1)
        return canvas


@dataclass(frozen=True)
class IndexedRoot(Drawable):
    """
    Root with an explicit degree written inside the mouth of the V.

    The V is sized by the index width. A radicand taller than the V gets
    its rising stroke extended upward before the overbar starts.
    """

    index: Drawable
    radicand: Drawable

    def _span(self) -> int:
        return (self.index.width() + 1) // 2

    def width(self) -> int:
        s = self._span()
        return 2 * s + max(0, self.radicand.height() - s) + self.radicand.width()

    def height(self) -> int:
        s = self._span()
        return max(self.index.height() + s, self.radicand.height() + 1)

    def level(self) -> int:
        height = self.height()
        return min(height - 1, height - (self.index.height() + 1) // 2)

    def to_canvas(self) -> TextCanvas:
        s = self._span()
        ih = self.index.height()
        iw = self.index.width()
        rh = self.radicand.height()
        rw = self.radicand.width()
        width = self.width()
        height = self.height()
        canvas = TextCanvas(width, height)

        canvas.draw(self.index.to_canvas(), iw % 2, height - ih - s)

        for i in range(s):
            canvas.set(i, height - s + i, FALLING)
            canvas.set(s + i, height - 1 - i, RISING)

        top = height - s
        for i in range(max(0, rh - s)):
            canvas.set(2 * s + i, top - 1, RISING)
            top -= 1

        for x in range(width - rw, width):
            canvas.set(x, top - 1, OVERBAR)

        canvas.draw(
            self.radicand.to_canvas(), width - rw, top + (height - top - rh + 1) // 2
        )
        return canvas
