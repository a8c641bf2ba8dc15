"""
Fixed-size grid of display units.

Every layout node paints into its own TextCanvas and parents blit child
canvases into theirs. A cell holds one display unit: a grapheme cluster
that occupies one column, normally a single character.
"""

from typing import List

from ..utils.errors import CanvasBoundsError, InvalidSizeError

BLANK = " "


class TextCanvas:
    """
    Rectangular character grid addressed by (x, y), origin at the top left.

    Usage:
        canvas = TextCanvas(3, 1)
        canvas.set(1, 0, "x")
        canvas.to_string()  # " x "
    """

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise InvalidSizeError(width, height)
        self.width = width
        self.height = height
        self._cells: List[List[str]] = [[BLANK] * width for _ in range(height)]

    def __repr__(self) -> str:
        return f"TextCanvas({self.width}, {self.height})"

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise CanvasBoundsError(x, y, self.width, self.height)

    def get(self, x: int, y: int) -> str:
        """Return the unit stored at (x, y)."""
        self._check(x, y)
        return self._cells[y][x]

    def set(self, x: int, y: int, unit: str) -> None:
        """Store a display unit at (x, y)."""
        self._check(x, y)
        self._cells[y][x] = unit

    def draw(self, other: "TextCanvas", at_x: int, at_y: int) -> None:
        """
        Copy every cell of another canvas onto this one.

        The whole target rectangle is validated before anything is copied,
        so a failed blit leaves this canvas untouched.

        Raises:
            CanvasBoundsError: If the source does not fit at (at_x, at_y).
        """
        if (
            at_x < 0
            or at_y < 0
            or at_x + other.width > self.width
            or at_y + other.height > self.height
        ):
            raise CanvasBoundsError(
                at_x,
                at_y,
                self.width,
                self.height,
                extent=(other.width, other.height),
            )

        for dy, row in enumerate(other._cells):
            self._cells[at_y + dy][at_x : at_x + other.width] = row

    def rows(self) -> List[str]:
        """Return each row joined into a string, top to bottom."""
        return ["".join(row) for row in self._cells]

    def to_string(self) -> str:
        """Serialize rows joined by newlines; an empty canvas gives ''."""
        return "\n".join(self.rows())
