"""Validate hotel XML feeds against an XSD and convert them to JSON."""

__version__ = "0.1.0"
