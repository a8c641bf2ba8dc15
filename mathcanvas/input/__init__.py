"""Input layer: AsciiMath tokenizing and parsing."""

from .lexer import tokenize, balance_brackets
from .parser import AsciiMathParser, parse

__all__ = ["tokenize", "balance_brackets", "AsciiMathParser", "parse"]
