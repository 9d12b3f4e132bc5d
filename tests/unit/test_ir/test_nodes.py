"""
Unit tests for expression tree nodes.

This module tests the node classes defined in sreader.ir.nodes.
"""

import pytest
from sreader.ir import Number, Symbol, StringLiteral, ListExpr


class TestNumber:
    """Tests for Number nodes."""

    def test_basic_value(self):
        node = Number(value=42.0)
        assert node.value == 42.0

    def test_int_and_float_compare_equal(self):
        """Test that integral values compare equal to their float form."""
        assert Number(42) == Number(42.0)

    def test_int_value_stored_as_float(self):
        """Test that an integer argument is converted to a float."""
        node = Number(7)
        assert isinstance(node.value, float)
        assert node.value == 7.0

    def test_immutability(self):
        """Test that Number is immutable."""
        node = Number(value=1.0)
        with pytest.raises(AttributeError):
            node.value = 2.0


class TestSymbolAndString:
    """Tests for Symbol and StringLiteral nodes."""

    def test_symbol_name(self):
        assert Symbol(name="lambda").name == "lambda"

    def test_string_content(self):
        assert StringLiteral(content="Hello, 世界").content == "Hello, 世界"

    def test_symbol_and_string_differ(self):
        """Test that a string is never equal to a symbol with the same text."""
        assert Symbol("x") != StringLiteral("x")

    def test_immutability(self):
        node = Symbol("x")
        with pytest.raises(AttributeError):
            node.name = "y"


class TestListExpr:
    """Tests for ListExpr nodes."""

    def test_empty_list(self):
        node = ListExpr()
        assert node.items == ()
        assert len(node) == 0

    def test_items_are_frozen_into_tuple(self):
        """Test that a list argument is copied into a tuple."""
        children = [Symbol("a"), Number(1)]
        node = ListExpr(children)
        children.append(Symbol("b"))
        assert node.items == (Symbol("a"), Number(1))

    def test_structural_equality(self):
        left = ListExpr((Symbol("f"), ListExpr((Number(1),))))
        right = ListExpr([Symbol("f"), ListExpr([Number(1)])])
        assert left == right

    def test_sequence_protocol(self):
        node = ListExpr((Symbol("a"), Symbol("b")))
        assert list(node) == [Symbol("a"), Symbol("b")]
        assert node[1] == Symbol("b")

    def test_hashable(self):
        """Test that nodes can be used as dict keys."""
        node = ListExpr((Symbol("a"), StringLiteral("b"), Number(2)))
        assert {node: 1}[ListExpr([Symbol("a"), StringLiteral("b"), Number(2)])] == 1

    def test_immutability(self):
        node = ListExpr(())
        with pytest.raises(AttributeError):
            node.items = (Symbol("x"),)
