"""
Pytest configuration and fixtures for sreader tests.
"""

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


@pytest.fixture
def sample_source_file(temp_dir):
    """Create a sample source file for testing."""
    sx_file = temp_dir / "test_input.sx"
    sx_file.write_text('; greeting\n(lambda (x) (concat "Hello" x))\n', encoding="utf-8")
    return sx_file


@pytest.fixture
def reader():
    """Provide a Reader instance."""
    from sreader import Reader
    return Reader()


@pytest.fixture
def parser():
    """Provide a Parser instance."""
    from sreader.frontend import Parser
    return Parser()


@pytest.fixture
def lexer():
    """Provide a Lexer instance."""
    from sreader.frontend import Lexer
    return Lexer()
