"""
Text rendering of math expressions.

Ties the pieces together: parse AsciiMath markup, translate the parse
tree to layout nodes, paint the root node and serialize the canvas.
"""

from typing import Optional

from ..input.parser import AsciiMathParser
from ..layout.nodes import Drawable
from ..models import Expression
from .translator import LayoutTranslator


class MathRenderer:
    """
    Render math expressions as multi-line plain text.

    Usage:
        renderer = MathRenderer()
        print(renderer.render("sqrt(1/2)"))
    """

    def __init__(
        self,
        parser: Optional[AsciiMathParser] = None,
        translator: Optional[LayoutTranslator] = None,
    ):
        """
        Initialize renderer.

        Args:
            parser: AsciiMath parser, a new one if not given
            translator: Parse-tree translator, a default one if not given
        """
        self.parser = parser or AsciiMathParser()
        self.translator = translator or LayoutTranslator()
        self._sympy_translator = None

    def layout(self, source: str) -> Optional[Drawable]:
        """Layout tree for AsciiMath markup, None when nothing draws."""
        return self.translator.visit_expr(self.parser.parse(source))

    def render(self, source: str) -> str:
        """
        Render AsciiMath markup to text.

        Args:
            source: AsciiMath markup (e.g., "x_1^2 + 1/2")

        Returns:
            Rows joined by newlines, without a trailing newline. Empty
            input gives an empty string.

        Raises:
            UnsupportedConstructError: For operators with no text layout.
            MalformedMatrixError: For matrices with ragged rows.
        """
        return self.render_tree(self.parser.parse(source))

    def render_tree(self, expr: Expression) -> str:
        """Render an already parsed expression."""
        node = self.translator.visit_expr(expr)
        if node is None:
            return ""
        return node.as_text()

    def render_sympy(self, expr) -> str:
        """
        Render a SymPy expression to text.

        Args:
            expr: Any SymPy expression, relation or matrix

        Returns:
            Rows joined by newlines.
        """
        if self._sympy_translator is None:
            from .sympy_translator import SympyTranslator

            self._sympy_translator = SympyTranslator(self.translator.symbols)
        return self._sympy_translator.translate(expr).as_text()


_default_renderer: Optional[MathRenderer] = None


def _renderer() -> MathRenderer:
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = MathRenderer()
    return _default_renderer


def render(source: str) -> str:
    """Render AsciiMath markup to multi-line text."""
    return _renderer().render(source)


def render_sympy(expr) -> str:
    """Render a SymPy expression to multi-line text."""
    return _renderer().render_sympy(expr)
