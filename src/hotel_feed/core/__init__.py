"""Logging and XML parsing primitives."""
