"""
Unit tests for the source printer.
"""

import pytest
from sreader import parse
from sreader.backend import stringify, stringify_expr, format_number
from sreader.ir import Number, Symbol, StringLiteral, ListExpr


class TestFormatNumber:
    """Tests for canonical number formatting."""

    @pytest.mark.parametrize("value, text", [
        (42.0, "42"),
        (-3.5, "-3.5"),
        (0.0, "0"),
        (-0.0, "-0"),
        (0.1, "0.1"),
        (1e21, "1e+21"),
        (2.5e-7, "2.5e-07"),
        (9007199254740992.0, "9007199254740992"),
    ])
    def test_format(self, value, text):
        assert format_number(value) == text


class TestStringify:
    """Tests for rendering expressions as source text."""

    def test_atoms(self):
        assert stringify_expr(Number(7)) == "7"
        assert stringify_expr(Symbol("concat")) == "concat"
        assert stringify_expr(StringLiteral("Hello")) == '"Hello"'

    def test_string_escaping(self):
        node = StringLiteral('say "hi"\n\\')
        assert stringify_expr(node) == r'"say \"hi\"\n\\"'

    def test_non_ascii_kept(self):
        assert stringify_expr(StringLiteral("café")) == '"café"'

    def test_empty_list(self):
        assert stringify_expr(ListExpr(())) == "()"

    def test_nested_list(self):
        tree = ListExpr((
            Symbol("lambda"),
            ListExpr((Symbol("x"),)),
            ListExpr((Symbol("concat"), StringLiteral("Hello"), Symbol("x"))),
        ))
        assert stringify_expr(tree) == '(lambda (x) (concat "Hello" x))'

    def test_top_level_joined_by_newlines(self):
        assert stringify([Symbol("a"), ListExpr((Number(1),)), StringLiteral("s")]) == 'a\n(1)\n"s"'

    def test_integer_valued_number(self):
        """Test that a Number built from an int prints without a fraction."""
        assert stringify([Number(7)]) == "7"
        assert format_number(-12) == "-12"

    def test_empty_sequence(self):
        assert stringify([]) == ""

    def test_unknown_node_type(self):
        with pytest.raises(TypeError):
            stringify_expr(object())

    def test_brackets_and_comments_are_normalized(self):
        source = "[define {x 1.50}] ; set x\n"
        assert stringify(parse(source)) == "(define (x 1.5))"


class TestRoundTrip:
    """Printing then parsing must give back the same tree."""

    @pytest.mark.parametrize("source", [
        '(lambda (x) (concat "Hello" x))',
        "(a (b (c (d))))",
        "[1 -2.5 .5 5. 1e3 1e999 +7 -0]",
        r'("esc \" \\ \n \t \u0001" "multi' + "\n" + r'line" "")',
        "(a (b) ; unclosed",
        "sym-bol ->> <= ?x #t 'quoted `bq ,unq",
        "() [] {}",
        '"é世"',
    ])
    def test_round_trip(self, source):
        tree = parse(source)
        assert parse(stringify(tree)) == tree

    def test_round_trip_is_stable(self):
        """Test that printing a reparsed tree gives the same text."""
        text = stringify(parse("{a [b 2.0] \"c\"}"))
        assert stringify(parse(text)) == text
