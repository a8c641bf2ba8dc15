"""
Core data structures for mathcanvas.

These dataclasses are the parse tree of an AsciiMath expression, the
contract between the parser (input layer) and the layout translator
(output layer).
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Missing:
    """Placeholder for an operand the input never supplied (e.g. "sqrt" at the end)."""


@dataclass(frozen=True)
class Number:
    value: str


@dataclass(frozen=True)
class Text:
    """Quoted text, printed verbatim."""

    value: str


@dataclass(frozen=True)
class Ident:
    value: str


@dataclass(frozen=True)
class Symbol:
    """Operator, relation or any other non-letter spelling."""

    value: str


@dataclass(frozen=True)
class Unary:
    op: str
    arg: "Simple"


@dataclass(frozen=True)
class Binary:
    op: str
    first: "Simple"
    second: "Simple"


@dataclass(frozen=True)
class Group:
    """Bracketed sub-expression. The brackets are kept as typed."""

    left: str
    expr: "Expression"
    right: str


@dataclass(frozen=True)
class Matrix:
    """
    Bracketed list of bracketed, comma-separated rows.

    Every row holds the same number of cells; each cell is an Expression.
    """

    left: str
    right: str
    rows: Tuple[Tuple["Expression", ...], ...]

    @property
    def num_cols(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def cells(self):
        """Iterate over the cells in row-major order."""
        for row in self.rows:
            yield from row


Simple = Union[Missing, Number, Text, Ident, Symbol, Unary, Binary, Group, Matrix]


@dataclass(frozen=True)
class SimpleScript:
    """A simple term with optional sub- and superscript."""

    simple: Simple
    sub: Optional[Simple] = None
    sup: Optional[Simple] = None

    @property
    def has_script(self) -> bool:
        return self.sub is not None or self.sup is not None


@dataclass(frozen=True)
class Func:
    """Named function application such as "sin x" or "log_2 x"."""

    name: str
    arg: Optional["ScriptFunc"] = None
    sub: Optional[Simple] = None
    sup: Optional[Simple] = None


ScriptFunc = Union[SimpleScript, Func]


@dataclass(frozen=True)
class Frac:
    """
    Slash fraction "a/b".

    The numerator of "a/b/c" is itself a Frac. The denominator is None
    when the input ends right after the slash.
    """

    numer: Union[ScriptFunc, "Frac"]
    denom: Optional[ScriptFunc] = None


Item = Union[SimpleScript, Func, Frac]


@dataclass(frozen=True)
class Expression:
    """Sequence of items, rendered side by side."""

    items: Tuple[Item, ...] = ()
