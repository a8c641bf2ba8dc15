"""
Parse tree to layout tree.

LayoutTranslator walks the mathcanvas.models tree and returns the layout
node that draws it. Operand positions (fraction parts, radicands, scripts
and binary operator arguments) drop the outer brackets of a bare group,
so "sqrt(x+1)" draws x+1 under the radical rather than (x+1).
"""

from typing import Mapping, Optional

from .. import models
from ..layout.brackets import BracketType
from ..layout.nodes import (
    Drawable,
    Fraction,
    Group,
    IndexedRoot,
    Literal,
    Matrix,
    Radical,
    Row,
    StackedPair,
    scripted,
)
from ..utils.errors import LayoutError, UnsupportedConstructError
from ..utils.symbols import (
    LEFT_BRACKETS,
    RIGHT_BRACKETS,
    SYMBOLS,
    VERTICAL_BAR,
    get_symbol,
)

LEFT_KINDS = {
    "round": BracketType.LEFT_ROUND,
    "square": BracketType.LEFT_SQUARE,
    "curly": BracketType.LEFT_CURLY,
    "angled": BracketType.LEFT_ANGLED,
    "none": BracketType.NONE,
}

RIGHT_KINDS = {
    "round": BracketType.RIGHT_ROUND,
    "square": BracketType.RIGHT_SQUARE,
    "curly": BracketType.RIGHT_CURLY,
    "angled": BracketType.RIGHT_ANGLED,
    "none": BracketType.NONE,
}

LEFT_BRACKET_TYPES = {s: LEFT_KINDS[k] for s, k in LEFT_BRACKETS.items()}
LEFT_BRACKET_TYPES[VERTICAL_BAR] = BracketType.VERTICAL

RIGHT_BRACKET_TYPES = {s: RIGHT_KINDS[k] for s, k in RIGHT_BRACKETS.items()}
RIGHT_BRACKET_TYPES[VERTICAL_BAR] = BracketType.VERTICAL


def bracket_type(spelling: str, table: Mapping[str, BracketType]) -> BracketType:
    """Resolve a bracket spelling; unknown spellings are a layout defect."""
    try:
        return table[spelling]
    except KeyError:
        raise LayoutError(f"Unknown bracket '{spelling}'") from None


class LayoutTranslator:
    """
    Translate parse trees into layout nodes.

    Usage:
        translator = LayoutTranslator()
        node = translator.visit_expr(parse("1/2"))
        print(node.as_text())
    """

    def __init__(self, symbols: Optional[Mapping[str, str]] = None):
        """
        Args:
            symbols: Spelling-to-glyph table for identifiers and symbols.
                Defaults to the built-in AsciiMath table.
        """
        self.symbols = SYMBOLS if symbols is None else symbols

    # === Expressions ===

    def visit_expr(self, expr: models.Expression) -> Optional[Drawable]:
        """Row of the items, or None when nothing in it draws."""
        nodes = [self.visit_item(item) for item in expr.items]
        if not nodes:
            return None
        return Row(tuple(nodes))

    def visit_item(self, item) -> Drawable:
        if isinstance(item, models.Frac):
            return self.visit_frac(item)
        return self.visit_script_func(item, omit_braces=False)

    def visit_frac(self, frac: models.Frac) -> Fraction:
        if isinstance(frac.numer, models.Frac):
            numerator = self.visit_frac(frac.numer)
        else:
            numerator = self.visit_script_func(frac.numer, omit_braces=True)

        if frac.denom is None:
            denominator = Literal("")
        else:
            denominator = self.visit_script_func(frac.denom, omit_braces=True)
        return Fraction(numerator, denominator)

    def visit_script_func(self, node, omit_braces: bool) -> Drawable:
        if isinstance(node, models.Func):
            return self.visit_func(node)
        return self.visit_simple_script(node, omit_braces)

    def visit_simple_script(
        self, node: models.SimpleScript, omit_braces: bool
    ) -> Drawable:
        # Scripted operands keep their brackets: (a+b)^2 is not a+b^2
        base = self.visit_simple(node.simple, omit_braces and not node.has_script)
        return scripted(base, self._script(node.sub), self._script(node.sup))

    def visit_func(self, func: models.Func) -> Drawable:
        """Function name with its scripts, followed by the argument as typed."""
        name = scripted(Literal(func.name), self._script(func.sub), self._script(func.sup))
        if func.arg is None:
            return name
        return Row((name, self.visit_script_func(func.arg, omit_braces=False)))

    def _script(self, simple: Optional[models.Simple]) -> Optional[Drawable]:
        """Script node, or None when the marker has nothing after it."""
        if simple is None or isinstance(simple, models.Missing):
            return None
        return self.visit_simple(simple, omit_braces=True)

    # === Simple terms ===

    def visit_simple(self, simple: models.Simple, omit_braces: bool) -> Drawable:
        if isinstance(simple, models.Missing):
            return Literal("")
        if isinstance(simple, (models.Number, models.Text)):
            return Literal(simple.value)
        if isinstance(simple, (models.Ident, models.Symbol)):
            return Literal(get_symbol(simple.value, self.symbols))
        if isinstance(simple, models.Unary):
            return self.visit_unary(simple)
        if isinstance(simple, models.Binary):
            return self.visit_binary(simple)
        if isinstance(simple, models.Group):
            return self.visit_group(simple, omit_braces)
        if isinstance(simple, models.Matrix):
            return self.visit_matrix(simple)
        raise UnsupportedConstructError(type(simple).__name__)

    def visit_unary(self, unary: models.Unary) -> Drawable:
        if unary.op == "sqrt":
            return Radical(self.visit_simple(unary.arg, omit_braces=True))
        if unary.op == "abs":
            return Group(
                BracketType.VERTICAL,
                self.visit_simple(unary.arg, omit_braces=True),
                BracketType.VERTICAL,
            )
        raise UnsupportedConstructError(unary.op)

    def visit_binary(self, binary: models.Binary) -> Drawable:
        if binary.op not in ("frac", "root", "stackrel", "overset", "underset"):
            raise UnsupportedConstructError(binary.op)

        first = self.visit_simple(binary.first, omit_braces=True)
        second = self.visit_simple(binary.second, omit_braces=True)
        if binary.op == "frac":
            return Fraction(first, second)
        if binary.op == "root":
            return IndexedRoot(first, second)
        if binary.op == "underset":
            return StackedPair(second, first)
        return StackedPair(first, second)

    def visit_group(self, group: models.Group, omit_braces: bool) -> Group:
        inner = self.visit_expr(group.expr)
        if omit_braces:
            return Group(BracketType.NONE, inner, BracketType.NONE)
        return Group(
            bracket_type(group.left, LEFT_BRACKET_TYPES),
            inner,
            bracket_type(group.right, RIGHT_BRACKET_TYPES),
        )

    def visit_matrix(self, matrix: models.Matrix) -> Matrix:
        cells = []
        for cell in matrix.cells():
            node = self.visit_expr(cell)
            cells.append(node if node is not None else Row(()))
        return Matrix(
            bracket_type(matrix.left, LEFT_BRACKET_TYPES),
            tuple(cells),
            bracket_type(matrix.right, RIGHT_BRACKET_TYPES),
            matrix.num_cols,
        )
