"""Classify changed files into named groups of glob patterns."""

__version__ = "0.3.0"
