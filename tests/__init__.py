"""
Test suite for sreader.

This package contains tests for the reader including:
- Unit tests for the lexer, parser, nodes and printers
- Tests for the Reader façade and the command-line interface
- Performance checks on large and deeply nested inputs
"""

__version__ = "0.1.0"
