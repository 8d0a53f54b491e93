"""Highlight log severity tokens in text streams with ANSI colors."""

__version__ = "0.1.0"
