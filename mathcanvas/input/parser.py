"""
AsciiMath to parse-tree parser.

Converts AsciiMath markup such as "sqrt(1/2)" or "[(a,b),(c,d)]" into the
dataclasses in mathcanvas.models using a lark LALR grammar fed by the
custom AsciiMathLexer.
"""

from typing import List, Optional

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedInput

from .lexer import AsciiMathLexer, balance_brackets, tokenize
from ..models import (
    Binary,
    Expression,
    Frac,
    Func,
    Group,
    Ident,
    Matrix,
    Missing,
    Number,
    SimpleScript,
    Symbol,
    Text,
    Unary,
)

# Shift/reduce conflicts resolve as shift, which is what makes scripts,
# function arguments and slash denominators bind greedily.
GRAMMAR = r"""
start: expr

expr: term*

?term: scriptfunc
     | frac
     | SUB   -> lone
     | SUP   -> lone
     | SLASH -> lone

frac: scriptfunc SLASH scriptfunc
    | scriptfunc SLASH
    | frac SLASH scriptfunc
    | frac SLASH

?scriptfunc: simple_script
           | func

simple_script: simple
             | simple script

func: FUNC
    | FUNC script
    | FUNC scriptfunc
    | FUNC script scriptfunc

script: SUB             -> sub
      | SUB simple      -> sub
      | SUP             -> sup
      | SUP simple      -> sup
      | SUB simple SUP  -> subsup
      | SUB simple SUP simple -> subsup
      | SUP simple SUB  -> supsub
      | SUP simple SUB simple -> supsub

simple: NUMBER                 -> number
      | IDENT                  -> ident
      | SYMBOL                 -> symbol
      | TEXT                   -> text
      | UNARY                  -> unary
      | UNARY simple           -> unary
      | BINARY                 -> binary
      | BINARY simple          -> binary
      | BINARY simple simple   -> binary
      | LBRACKET expr RBRACKET -> group

%declare NUMBER IDENT SYMBOL TEXT UNARY BINARY FUNC LBRACKET RBRACKET SUB SUP SLASH
"""

MATRIX_ROW_BRACKETS = ("(", "[")
COMMA = Symbol(",")


def _split_on_commas(items) -> List[Expression]:
    """Split a row's items into cells at unscripted comma symbols."""
    cells: List[list] = [[]]
    for item in items:
        if item == SimpleScript(COMMA):
            cells.append([])
        else:
            cells[-1].append(item)
    return [Expression(tuple(cell)) for cell in cells]


def as_matrix(left: str, expr: Expression, right: str) -> Optional[Matrix]:
    """
    Recognise "[(a,b),(c,d)]" style input.

    The group must hold at least two rows separated by commas, every row an
    unscripted group opened by the same "(" or "[", and every row must
    split into the same number of cells.
    """
    items = expr.items
    if len(items) < 3 or len(items) % 2 == 0:
        return None
    if any(item != SimpleScript(COMMA) for item in items[1::2]):
        return None

    row_groups = items[0::2]
    for item in row_groups:
        if not (
            isinstance(item, SimpleScript)
            and not item.has_script
            and isinstance(item.simple, Group)
            and item.simple.left in MATRIX_ROW_BRACKETS
        ):
            return None
    if len({item.simple.left for item in row_groups}) != 1:
        return None

    rows = tuple(tuple(_split_on_commas(item.simple.expr.items)) for item in row_groups)
    if len({len(row) for row in rows}) != 1:
        return None

    return Matrix(left=left, right=right, rows=rows)


@v_args(inline=True)
class ExpressionBuilder(Transformer):
    """Builds mathcanvas.models nodes bottom-up while lark reduces."""

    def start(self, expr):
        return expr

    def expr(self, *items):
        return Expression(tuple(items))

    def lone(self, tok):
        # A script or slash with nothing to attach to prints as itself
        return SimpleScript(Symbol(str(tok)))

    def frac(self, numer, _slash, denom=None):
        return Frac(numer, denom)

    def simple_script(self, simple, script=None):
        sub, sup = script if script is not None else (None, None)
        return SimpleScript(simple, sub, sup)

    def func(self, tok, *rest):
        sub = sup = arg = None
        for part in rest:
            if isinstance(part, tuple):
                sub, sup = part
            else:
                arg = part
        return Func(str(tok), arg, sub, sup)

    def sub(self, _tok, simple=None):
        return (simple if simple is not None else Missing(), None)

    def sup(self, _tok, simple=None):
        return (None, simple if simple is not None else Missing())

    def subsup(self, _sub, sub, _sup, sup=None):
        return (sub, sup if sup is not None else Missing())

    def supsub(self, _sup, sup, _sub, sub=None):
        return (sub if sub is not None else Missing(), sup)

    def number(self, tok):
        return Number(str(tok))

    def ident(self, tok):
        return Ident(str(tok))

    def symbol(self, tok):
        return Symbol(str(tok))

    def text(self, tok):
        return Text(str(tok))

    def unary(self, tok, arg=None):
        return Unary(str(tok), arg if arg is not None else Missing())

    def binary(self, tok, first=None, second=None):
        return Binary(
            str(tok),
            first if first is not None else Missing(),
            second if second is not None else Missing(),
        )

    def group(self, left, expr, right):
        matrix = as_matrix(str(left), expr, str(right))
        if matrix is not None:
            return matrix
        return Group(str(left), expr, str(right))


class AsciiMathParser:
    """
    Parse AsciiMath markup into an Expression.

    Parsing never fails: brackets are balanced before the grammar runs,
    and anything the grammar still rejects degrades to a flat row of the
    input tokens.

    Usage:
        parser = AsciiMathParser()
        expr = parser.parse("x^2 + 1/2")
    """

    def __init__(self):
        """Build the LALR tables once; the parser is reusable."""
        self._lark = Lark(
            GRAMMAR,
            parser="lalr",
            lexer=AsciiMathLexer,
            transformer=ExpressionBuilder(),
        )

    def parse(self, source: str) -> Expression:
        """
        Parse markup into a parse tree.

        Args:
            source: AsciiMath markup (e.g., "sum_(i=1)^n i")

        Returns:
            Expression holding the top-level items.
        """
        try:
            return self._lark.parse(source)
        except UnexpectedInput:
            return self._literal_fallback(source)

    def _literal_fallback(self, source: str) -> Expression:
        """Every token as a plain symbol, in input order."""
        items = [
            SimpleScript(Symbol(str(tok))) for tok in balance_brackets(tokenize(source))
        ]
        return Expression(tuple(items))


_default_parser: Optional[AsciiMathParser] = None


def parse(source: str) -> Expression:
    """Parse markup with a shared AsciiMathParser."""
    global _default_parser
    if _default_parser is None:
        _default_parser = AsciiMathParser()
    return _default_parser.parse(source)
