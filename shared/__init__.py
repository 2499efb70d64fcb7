"""Shared interfaces for Iso-Path."""
