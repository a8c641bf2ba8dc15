"""
AsciiMath tokenizer.

Splits source text into lark Tokens and pairs up brackets before the
grammar sees them, so the parser only ever works on balanced input.
"""

from typing import Iterator, List

import regex
from lark import Token
from lark.lexer import Lexer

from ..utils.symbols import (
    BINARY_OPERATORS,
    FUNCTIONS,
    LEFT_BRACKETS,
    RIGHT_BRACKETS,
    SYMBOLS,
    UNARY_OPERATORS,
    VERTICAL_BAR,
)

# Terminal names shared with the grammar
NUMBER = "NUMBER"
IDENT = "IDENT"
SYMBOL = "SYMBOL"
TEXT = "TEXT"
UNARY = "UNARY"
BINARY = "BINARY"
FUNC = "FUNC"
LBRACKET = "LBRACKET"
RBRACKET = "RBRACKET"
VBAR = "VBAR"
SUB = "SUB"
SUP = "SUP"
SLASH = "SLASH"


def _spelling_kinds() -> dict:
    """Every fixed spelling mapped to its token kind, later entries winning."""
    kinds = {name: SYMBOL for name in SYMBOLS}
    kinds.update({name: FUNC for name in FUNCTIONS})
    kinds.update({name: UNARY for name in UNARY_OPERATORS})
    kinds.update({name: BINARY for name in BINARY_OPERATORS})
    kinds.update({name: LBRACKET for name in LEFT_BRACKETS})
    kinds.update({name: RBRACKET for name in RIGHT_BRACKETS})
    kinds.update({VERTICAL_BAR: VBAR, "_": SUB, "^": SUP, "/": SLASH})
    return kinds


SPELLINGS = _spelling_kinds()

_WHITESPACE = regex.compile(r"\s+")
_QUOTED = regex.compile(r'"([^"]*)"')
_TEXT_CALL = regex.compile(r"text\s*\(([^)]*)\)")
_NUMBER = regex.compile(r"\d+(?:\.\d+)?")
# Longest spelling first so "<=>" wins over "<=" and "sinh" over "sin"
_SPELLING = regex.compile(
    "|".join(regex.escape(s) for s in sorted(SPELLINGS, key=len, reverse=True))
)
_GRAPHEME = regex.compile(r"\X")


def tokenize(source: str) -> List[Token]:
    """
    Split source into tokens without pairing brackets.

    Whitespace only separates tokens. Quoted strings and text(...) become
    TEXT, digits become NUMBER, known spellings take their table kind,
    and any other character is an IDENT when it is a letter and a
    SYMBOL otherwise.
    """
    tokens = []
    pos = 0
    end = len(source)

    while pos < end:
        match = _WHITESPACE.match(source, pos)
        if match:
            pos = match.end()
            continue

        for pattern in (_QUOTED, _TEXT_CALL):
            match = pattern.match(source, pos)
            if match:
                tokens.append(Token(TEXT, match.group(1)))
                break
        else:
            match = _NUMBER.match(source, pos)
            if match:
                tokens.append(Token(NUMBER, match.group()))
            else:
                match = _SPELLING.match(source, pos)
                if match:
                    tokens.append(Token(SPELLINGS[match.group()], match.group()))
                else:
                    match = _GRAPHEME.match(source, pos)
                    unit = match.group()
                    kind = IDENT if unit.isalpha() else SYMBOL
                    tokens.append(Token(kind, unit))

        pos = match.end()

    return tokens


def balance_brackets(tokens: List[Token]) -> List[Token]:
    """
    Pair brackets, demoting the ones without a partner to SYMBOL.

    A vertical bar closes the nearest open vertical bar when nothing else
    was opened after it, otherwise it opens a new one. A closing bracket
    closes the innermost opener, discarding unclosed bars above it.
    """
    result = list(tokens)
    stack: List[int] = []

    def demote(index: int) -> None:
        result[index] = Token(SYMBOL, str(result[index]))

    for i, tok in enumerate(result):
        if tok.type == LBRACKET:
            stack.append(i)
        elif tok.type == RBRACKET:
            while stack and result[stack[-1]].type == VBAR:
                demote(stack.pop())
            if stack:
                stack.pop()
            else:
                demote(i)
        elif tok.type == VBAR:
            if stack and result[stack[-1]].type == VBAR:
                opener = stack.pop()
                result[opener] = Token(LBRACKET, VERTICAL_BAR)
                result[i] = Token(RBRACKET, VERTICAL_BAR)
            else:
                stack.append(i)

    for index in stack:
        demote(index)

    return result


class AsciiMathLexer(Lexer):
    """Custom lark lexer: tokenize, then balance brackets."""

    def __init__(self, lexer_conf):
        pass

    def lex(self, data: str) -> Iterator[Token]:
        yield from balance_brackets(tokenize(data))
