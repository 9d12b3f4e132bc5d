"""
Core reader module for sreader.

This module contains the Reader façade that ties the frontend together
and reports results for callers that prefer not to handle exceptions.
"""

from .reader import Reader, ReadResult

__all__ = [
    "Reader",
    "ReadResult",
]
