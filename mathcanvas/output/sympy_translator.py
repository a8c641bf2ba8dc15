"""
SymPy expression to layout tree.

Lays out symbolic results with the same nodes the AsciiMath front end
uses: quotients become fractions, square roots radicals, powers
superscripts and matrices bracketed grids.
"""

from typing import Mapping, Optional

import sympy as sp

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
    ScriptedNode,
)
from ..utils.errors import UnsupportedConstructError
from ..utils.symbols import SYMBOLS

RELATION_GLYPHS = {
    "==": "=",
    "!=": "≠",
    "<": "<",
    "<=": "≤",
    ">": ">",
    ">=": "≥",
}

TIMES = "⋅"


def _parens(node: Drawable) -> Group:
    return Group(BracketType.LEFT_ROUND, node, BracketType.RIGHT_ROUND)


class SympyTranslator:
    """
    Translate SymPy expressions into layout nodes.

    Usage:
        translator = SympyTranslator()
        node = translator.translate(sp.sqrt(x) / 2)
        print(node.as_text())
    """

    def __init__(self, symbols: Optional[Mapping[str, str]] = None):
        self.symbols = SYMBOLS if symbols is None else symbols

    def translate(self, expr) -> Drawable:
        """
        Lay out a SymPy expression.

        Raises:
            UnsupportedConstructError: For expression types with no layout
                (integrals, sets, piecewise, ...).
        """
        return self._visit(sp.sympify(expr))

    def _visit(self, expr) -> Drawable:
        if isinstance(expr, sp.MatrixBase):
            return self._matrix(expr)
        if isinstance(expr, sp.core.relational.Relational):
            return self._relational(expr)

        constant = self._constant(expr)
        if constant is not None:
            return Literal(constant)

        if isinstance(expr, sp.Integer):
            return Literal(str(expr))
        if isinstance(expr, sp.Rational):
            return self._rational(expr)
        if isinstance(expr, sp.Float):
            return Literal(sp.sstr(expr, full_prec=False))
        if isinstance(expr, sp.Symbol):
            return self._symbol(expr)
        if isinstance(expr, sp.Add):
            return self._add(expr)
        if isinstance(expr, sp.Mul):
            return self._mul(expr)
        if isinstance(expr, sp.Pow):
            return self._pow(expr)
        if isinstance(expr, sp.exp):
            return ScriptedNode(Literal("e"), sup=self._visit(expr.args[0]))
        if isinstance(expr, sp.Abs):
            return Group(
                BracketType.VERTICAL, self._visit(expr.args[0]), BracketType.VERTICAL
            )
        if isinstance(expr, sp.Function):
            return self._function(expr)

        raise UnsupportedConstructError(type(expr).__name__)

    def _constant(self, expr) -> Optional[str]:
        if expr is sp.pi:
            return "π"
        if expr is sp.E:
            return "e"
        if expr is sp.I:
            return "i"
        if expr is sp.oo:
            return "∞"
        if expr is sp.S.NegativeInfinity:
            return "-∞"
        if expr is sp.nan:
            return "NaN"
        return None

    def _glyph(self, name: str) -> str:
        if name.isalpha():
            return self.symbols.get(name, name)
        return name

    def _symbol(self, symbol: sp.Symbol) -> Drawable:
        """Greek names become letters, "x_1" becomes x with subscript 1."""
        base, _, sub = symbol.name.partition("_")
        if base and sub:
            return ScriptedNode(Literal(self._glyph(base)), sub=Literal(self._glyph(sub)))
        return Literal(self._glyph(symbol.name))

    def _rational(self, value: sp.Rational) -> Drawable:
        node = Fraction(Literal(str(abs(value.p))), Literal(str(value.q)))
        if value.p < 0:
            return Row((Literal("-"), node))
        return node

    def _add(self, expr: sp.Add) -> Row:
        terms = expr.as_ordered_terms()
        children = [self._visit(terms[0])]
        for term in terms[1:]:
            if term.could_extract_minus_sign():
                children.append(Literal(" - "))
                children.append(self._visit(-term))
            else:
                children.append(Literal(" + "))
                children.append(self._visit(term))
        return Row(tuple(children))

    def _mul(self, expr: sp.Mul) -> Drawable:
        if expr.could_extract_minus_sign():
            return Row((Literal("-"), self._visit(-expr)))

        numer, denom = sp.fraction(expr)
        if denom != 1:
            return Fraction(self._visit(numer), self._visit(denom))

        children = []
        for factor in expr.as_ordered_factors():
            if children:
                children.append(Literal(TIMES))
            node = self._visit(factor)
            children.append(_parens(node) if isinstance(factor, sp.Add) else node)
        return Row(tuple(children))

    def _pow(self, expr: sp.Pow) -> Drawable:
        base, exponent = expr.as_base_exp()

        if exponent.could_extract_minus_sign():
            return Fraction(Literal("1"), self._visit(sp.Pow(base, -exponent)))
        if exponent == sp.S.Half:
            return Radical(self._visit(base))
        if exponent.is_Rational and exponent.p == 1 and exponent.q > 2:
            return IndexedRoot(Literal(str(exponent.q)), self._visit(base))

        base_node = self._visit(base)
        if (
            isinstance(base, (sp.Add, sp.Mul, sp.Pow))
            or (base.is_Rational and not base.is_Integer)
            or base.could_extract_minus_sign()
        ):
            base_node = _parens(base_node)
        return ScriptedNode(base_node, sup=self._visit(exponent))

    def _relational(self, expr) -> Row:
        glyph = RELATION_GLYPHS.get(expr.rel_op, expr.rel_op)
        return Row((self._visit(expr.lhs), Literal(f" {glyph} "), self._visit(expr.rhs)))

    def _function(self, expr) -> Row:
        args = []
        for arg in expr.args:
            if args:
                args.append(Literal(","))
            args.append(self._visit(arg))
        return Row((Literal(expr.func.__name__), _parens(Row(tuple(args)))))

    def _matrix(self, matrix) -> Matrix:
        rows, cols = matrix.shape
        cells = tuple(self._visit(matrix[i, j]) for i in range(rows) for j in range(cols))
        return Matrix(BracketType.LEFT_SQUARE, cells, BracketType.RIGHT_SQUARE, cols)
