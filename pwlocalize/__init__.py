"""Merge translated game interface dialog XML and string tables into a localized output tree."""

__version__ = "0.1.0"