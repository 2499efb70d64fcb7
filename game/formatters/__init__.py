"""Action notation converters for Iso-Path."""

from .notation_formatter import NotationFormatter

__all__ = ["NotationFormatter"]
