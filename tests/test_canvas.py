"""
Tests for the text canvas and bracket drawing.
"""

import pytest
import sys
from pathlib import Path

# Add the checkout to path
sys.path.insert(0, str(Path(__file__).parent.parent))


class TestTextCanvas:
    """Tests for TextCanvas."""

    def test_new_canvas_is_blank(self):
        """Test every cell starts as a space."""
        from mathcanvas.layout.canvas import TextCanvas

        canvas = TextCanvas(3, 2)

        assert canvas.to_string() == "   \n   "

    def test_zero_height_serializes_empty(self):
        """Test a canvas without rows gives the empty string."""
        from mathcanvas.layout.canvas import TextCanvas

        assert TextCanvas(0, 0).to_string() == ""
        assert TextCanvas(5, 0).to_string() == ""

    def test_negative_size_rejected(self):
        """Test negative dimensions raise InvalidSizeError."""
        from mathcanvas.layout.canvas import TextCanvas
        from mathcanvas.utils.errors import InvalidSizeError

        with pytest.raises(InvalidSizeError):
            TextCanvas(-1, 1)

    def test_set_and_get(self):
        """Test cells round trip through set and get."""
        from mathcanvas.layout.canvas import TextCanvas

        canvas = TextCanvas(2, 2)
        canvas.set(1, 1, "x")

        assert canvas.get(1, 1) == "x"
        assert canvas.rows() == ["  ", " x"]

    def test_out_of_bounds_access(self):
        """Test get/set outside the grid raise CanvasBoundsError."""
        from mathcanvas.layout.canvas import TextCanvas
        from mathcanvas.utils.errors import CanvasBoundsError

        canvas = TextCanvas(2, 1)

        with pytest.raises(CanvasBoundsError):
            canvas.set(2, 0, "x")
        with pytest.raises(CanvasBoundsError):
            canvas.get(0, -1)

    def test_draw_copies_cells(self):
        """Test blitting a canvas onto another."""
        from mathcanvas.layout.canvas import TextCanvas

        small = TextCanvas(2, 1)
        small.set(0, 0, "a")
        small.set(1, 0, "b")
        big = TextCanvas(4, 2)
        big.draw(small, 1, 1)

        assert big.to_string() == "    \n ab "

    def test_draw_out_of_range_leaves_target_untouched(self):
        """Test a blit that does not fit copies nothing."""
        from mathcanvas.layout.canvas import TextCanvas
        from mathcanvas.utils.errors import CanvasBoundsError

        small = TextCanvas(2, 1)
        small.set(0, 0, "a")
        big = TextCanvas(2, 1)

        with pytest.raises(CanvasBoundsError):
            big.draw(small, 1, 0)
        assert big.to_string() == "  "

    def test_draw_empty_canvas(self):
        """Test blitting a zero-size canvas at the far edge is allowed."""
        from mathcanvas.layout.canvas import TextCanvas

        big = TextCanvas(2, 1)
        big.draw(TextCanvas(0, 1), 2, 0)

        assert big.to_string() == "  "


class TestBracketWidth:
    """Tests for bracket_width."""

    def test_none_takes_no_space(self):
        """Test NONE brackets are zero width at any height."""
        from mathcanvas.layout.brackets import BracketType, bracket_width

        assert bracket_width(BracketType.NONE, 0) == 0
        assert bracket_width(BracketType.NONE, 5) == 0

    def test_empty_content_is_one_column(self):
        """Test every real bracket is one column around empty content."""
        from mathcanvas.layout.brackets import BracketType, bracket_width

        for kind in BracketType:
            if kind is not BracketType.NONE:
                assert bracket_width(kind, 0) == 1

    def test_angled_grows_with_height(self):
        """Test angled brackets widen to keep a unit slope."""
        from mathcanvas.layout.brackets import BracketType, bracket_width

        assert bracket_width(BracketType.LEFT_ANGLED, 1) == 1
        assert bracket_width(BracketType.LEFT_ANGLED, 3) == 2
        assert bracket_width(BracketType.RIGHT_ANGLED, 4) == 2
        assert bracket_width(BracketType.RIGHT_ANGLED, 5) == 3

    def test_round_stays_narrow(self):
        """Test round brackets are one column tall or short."""
        from mathcanvas.layout.brackets import BracketType, bracket_width

        assert bracket_width(BracketType.LEFT_ROUND, 7) == 1


def _bracket(kind, height):
    """Draw a bracket on a canvas sized to fit it and return its text."""
    from mathcanvas.layout.brackets import bracket_width, draw_bracket
    from mathcanvas.layout.canvas import TextCanvas

    canvas = TextCanvas(bracket_width(kind, height), max(height, 1))
    draw_bracket(canvas, kind, height, 0, 0)
    return canvas.to_string()


class TestDrawBracket:
    """Tests for draw_bracket glyph selection."""

    def test_single_row_glyphs(self):
        """Test one-row content uses plain ASCII-style glyphs."""
        from mathcanvas.layout.brackets import BracketType

        assert _bracket(BracketType.LEFT_ROUND, 1) == "("
        assert _bracket(BracketType.RIGHT_SQUARE, 1) == "]"
        assert _bracket(BracketType.LEFT_CURLY, 0) == "{"
        assert _bracket(BracketType.LEFT_ANGLED, 1) == "⟨"
        assert _bracket(BracketType.VERTICAL, 1) == "|"

    def test_two_row_round(self):
        """Test the hand-picked two-row pieces."""
        from mathcanvas.layout.brackets import BracketType

        assert _bracket(BracketType.LEFT_ROUND, 2) == "⎛\n⎝"
        assert _bracket(BracketType.RIGHT_ROUND, 2) == "⎞\n⎠"
        assert _bracket(BracketType.LEFT_CURLY, 2) == "⎰\n⎱"

    def test_tall_square(self):
        """Test top, extension and bottom pieces."""
        from mathcanvas.layout.brackets import BracketType

        assert _bracket(BracketType.LEFT_SQUARE, 4) == "⎡\n⎢\n⎢\n⎣"
        assert _bracket(BracketType.RIGHT_ROUND, 3) == "⎞\n⎟\n⎠"

    def test_tall_curly_has_waist(self):
        """Test the curly brace waist sits at the middle row."""
        from mathcanvas.layout.brackets import BracketType

        assert _bracket(BracketType.LEFT_CURLY, 3) == "⎧\n⎨\n⎩"
        assert _bracket(BracketType.RIGHT_CURLY, 5) == "⎫\n⎪\n⎬\n⎪\n⎭"

    def test_tall_vertical(self):
        """Test vertical bars repeat the same glyph on every row."""
        from mathcanvas.layout.brackets import BracketType

        assert _bracket(BracketType.VERTICAL, 3) == "￨\n￨\n￨"

    def test_angled_even_height(self):
        """Test even-height angled brackets are two diagonals."""
        from mathcanvas.layout.brackets import BracketType

        assert _bracket(BracketType.LEFT_ANGLED, 2) == "╱\n╲"
        assert _bracket(BracketType.RIGHT_ANGLED, 4) == "╲ \n ╲\n ╱\n╱ "
        assert _bracket(BracketType.LEFT_ANGLED, 4) == " ╱\n╱ \n╲ \n ╲"

    def test_angled_odd_height(self):
        """Test odd-height angled brackets meet at a point glyph."""
        from mathcanvas.layout.brackets import BracketType

        assert _bracket(BracketType.LEFT_ANGLED, 3) == " ╱\n\U0001FBA4 \n ╲"
        assert _bracket(BracketType.RIGHT_ANGLED, 3) == "╲ \n \U0001FBA5\n╱ "

    def test_none_draws_nothing(self):
        """Test NONE leaves the canvas alone."""
        from mathcanvas.layout.brackets import BracketType, draw_bracket
        from mathcanvas.layout.canvas import TextCanvas

        canvas = TextCanvas(1, 1)
        draw_bracket(canvas, BracketType.NONE, 1, 0, 0)

        assert canvas.to_string() == " "

    def test_unknown_kind_rejected(self):
        """Test a non-BracketType kind raises LayoutError."""
        from mathcanvas.layout.brackets import draw_bracket
        from mathcanvas.layout.canvas import TextCanvas
        from mathcanvas.utils.errors import LayoutError

        with pytest.raises(LayoutError):
            draw_bracket(TextCanvas(1, 1), "(", 1, 0, 0)
