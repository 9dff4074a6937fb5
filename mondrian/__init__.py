"""Procedural Mondrian-style art generation."""

__version__ = "0.1.0"
