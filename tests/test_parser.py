"""
Tests for the AsciiMath tokenizer and parser.
"""

import pytest
import sys
from pathlib import Path

# Add the checkout to path
sys.path.insert(0, str(Path(__file__).parent.parent))


def kinds(tokens):
    return [(tok.type, str(tok)) for tok in tokens]


class TestTokenize:
    """Tests for tokenize."""

    def test_numbers_and_identifiers(self):
        """Test digits group into numbers, letters stay single."""
        from mathcanvas.input.lexer import tokenize

        assert kinds(tokenize("12.5ab")) == [
            ("NUMBER", "12.5"),
            ("IDENT", "a"),
            ("IDENT", "b"),
        ]

    def test_longest_spelling_wins(self):
        """Test "<=>" is not read as "<=" then ">"."""
        from mathcanvas.input.lexer import tokenize

        assert kinds(tokenize("a<=>b"))[1] == ("SYMBOL", "<=>")
        assert kinds(tokenize("sinh x"))[0] == ("FUNC", "sinh")

    def test_whitespace_only_separates(self):
        """Test spaces produce no tokens."""
        from mathcanvas.input.lexer import tokenize

        assert kinds(tokenize("  x   +  y ")) == [
            ("IDENT", "x"),
            ("SYMBOL", "+"),
            ("IDENT", "y"),
        ]

    def test_text(self):
        """Test quoted strings and text(...) keep their spaces."""
        from mathcanvas.input.lexer import tokenize

        assert kinds(tokenize('"hi there"')) == [("TEXT", "hi there")]
        assert kinds(tokenize("text(a b)")) == [("TEXT", "a b")]

    def test_operator_kinds(self):
        """Test operator words and punctuation get their own kinds."""
        from mathcanvas.input.lexer import tokenize

        assert [tok.type for tok in tokenize("sqrt frac alpha _ ^ / ( ) |")] == [
            "UNARY",
            "BINARY",
            "SYMBOL",
            "SUB",
            "SUP",
            "SLASH",
            "LBRACKET",
            "RBRACKET",
            "VBAR",
        ]

    def test_unknown_character_is_symbol(self):
        """Test characters outside the tables become symbols."""
        from mathcanvas.input.lexer import tokenize

        assert kinds(tokenize("€")) == [("SYMBOL", "€")]


class TestBalanceBrackets:
    """Tests for balance_brackets."""

    def test_vertical_bars_pair(self):
        """Test two bars become a bracket pair."""
        from mathcanvas.input.lexer import balance_brackets, tokenize

        assert [t.type for t in balance_brackets(tokenize("|x|"))] == [
            "LBRACKET",
            "IDENT",
            "RBRACKET",
        ]

    def test_unmatched_closer_demoted(self):
        """Test a stray closing bracket is an ordinary symbol."""
        from mathcanvas.input.lexer import balance_brackets, tokenize

        assert kinds(balance_brackets(tokenize("a)"))) == [
            ("IDENT", "a"),
            ("SYMBOL", ")"),
        ]

    def test_unclosed_opener_demoted(self):
        """Test an opener with no partner is an ordinary symbol."""
        from mathcanvas.input.lexer import balance_brackets, tokenize

        assert kinds(balance_brackets(tokenize("(a")))[0] == ("SYMBOL", "(")

    def test_bar_inside_group_does_not_escape(self):
        """Test a lone bar inside brackets is dropped at the closer."""
        from mathcanvas.input.lexer import balance_brackets, tokenize

        result = kinds(balance_brackets(tokenize("(a|b)")))

        assert result == [
            ("LBRACKET", "("),
            ("IDENT", "a"),
            ("SYMBOL", "|"),
            ("IDENT", "b"),
            ("RBRACKET", ")"),
        ]


class TestAsciiMathParser:
    """Tests for the parse tree built by AsciiMathParser."""

    def test_simple_sequence(self):
        """Test a flat expression."""
        from mathcanvas.input.parser import parse
        from mathcanvas.models import Ident, SimpleScript, Symbol

        expr = parse("a+b")

        assert expr.items == (
            SimpleScript(Ident("a")),
            SimpleScript(Symbol("+")),
            SimpleScript(Ident("b")),
        )

    def test_empty_input(self):
        """Test empty markup gives an empty expression."""
        from mathcanvas.input.parser import parse

        assert parse("").items == ()
        assert parse("   ").items == ()

    def test_fraction(self):
        """Test slash fractions bind the neighbouring terms."""
        from mathcanvas.input.parser import parse
        from mathcanvas.models import Frac, Number, SimpleScript

        assert parse("1/2").items == (
            Frac(SimpleScript(Number("1")), SimpleScript(Number("2"))),
        )

    def test_fraction_left_associative(self):
        """Test a/b/c nests in the numerator."""
        from mathcanvas.input.parser import parse
        from mathcanvas.models import Frac, Ident, SimpleScript

        a, b, c = (SimpleScript(Ident(n)) for n in "abc")

        assert parse("a/b/c").items == (Frac(Frac(a, b), c),)

    def test_fraction_missing_denominator(self):
        """Test a trailing slash leaves the denominator empty."""
        from mathcanvas.input.parser import parse
        from mathcanvas.models import Frac

        (frac,) = parse("a/").items

        assert isinstance(frac, Frac)
        assert frac.denom is None

    def test_scripts(self):
        """Test sub- and superscripts in both orders."""
        from mathcanvas.input.parser import parse
        from mathcanvas.models import Ident, Number, SimpleScript

        expected = SimpleScript(Ident("x"), sub=Number("1"), sup=Number("2"))

        assert parse("x_1^2").items == (expected,)
        assert parse("x^2_1").items == (expected,)

    def test_missing_script_operand(self):
        """Test a script marker at the end of input."""
        from mathcanvas.input.parser import parse
        from mathcanvas.models import Ident, Missing, SimpleScript

        assert parse("x^").items == (SimpleScript(Ident("x"), sup=Missing()),)

    def test_lone_script_marker(self):
        """Test a leading caret prints as itself."""
        from mathcanvas.input.parser import parse
        from mathcanvas.models import SimpleScript, Symbol

        assert parse("^").items == (SimpleScript(Symbol("^")),)

    def test_unary_and_binary(self):
        """Test operators take the following simple terms."""
        from mathcanvas.input.parser import parse
        from mathcanvas.models import Binary, Ident, Number, SimpleScript, Unary

        assert parse("sqrt x").items == (SimpleScript(Unary("sqrt", Ident("x"))),)
        assert parse("frac 1 2").items == (
            SimpleScript(Binary("frac", Number("1"), Number("2"))),
        )

    def test_missing_operator_arguments(self):
        """Test operators at the end of input get Missing operands."""
        from mathcanvas.input.parser import parse
        from mathcanvas.models import Binary, Ident, Missing, SimpleScript, Unary

        assert parse("sqrt").items == (SimpleScript(Unary("sqrt", Missing())),)
        assert parse("root x").items == (
            SimpleScript(Binary("root", Ident("x"), Missing())),
        )

    def test_function_application(self):
        """Test functions take scripts and an argument."""
        from mathcanvas.input.parser import parse
        from mathcanvas.models import Func, Ident, Number, SimpleScript

        assert parse("log_2 x").items == (
            Func("log", SimpleScript(Ident("x")), sub=Number("2")),
        )
        assert parse("sin").items == (Func("sin"),)

    def test_group(self):
        """Test brackets keep their spelling."""
        from mathcanvas.input.parser import parse
        from mathcanvas.models import Expression, Group, Ident, SimpleScript

        assert parse("<<a>>").items == (
            SimpleScript(Group("<<", Expression((SimpleScript(Ident("a")),)), ">>")),
        )

    def test_matrix(self):
        """Test bracketed rows of equal width become a matrix."""
        from mathcanvas.input.parser import parse
        from mathcanvas.models import Matrix

        (item,) = parse("[(a,b),(c,d)]").items

        assert isinstance(item.simple, Matrix)
        assert item.simple.num_cols == 2
        assert len(item.simple.rows) == 2
        assert item.simple.left == "["

    def test_ragged_rows_stay_a_group(self):
        """Test rows of different widths are not a matrix."""
        from mathcanvas.input.parser import parse
        from mathcanvas.models import Group

        (item,) = parse("[(a,b),(c)]").items

        assert isinstance(item.simple, Group)

    def test_single_row_is_not_a_matrix(self):
        """Test a one-row list is just a nested group."""
        from mathcanvas.input.parser import parse
        from mathcanvas.models import Group

        (item,) = parse("((a,b))").items

        assert isinstance(item.simple, Group)

    def test_parser_never_raises(self):
        """Test malformed bracket soup still parses."""
        from mathcanvas.input.parser import AsciiMathParser

        parser = AsciiMathParser()

        for source in [")(", "|||", "(]", "_^/", "sqrt sqrt", "{:"]:
            assert parser.parse(source) is not None
