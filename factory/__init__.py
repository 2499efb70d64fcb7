"""Factory helpers for Iso-Path."""

from factory.isopath_factory import IsopathFactory

__all__ = ["IsopathFactory"]
