"""Geometric value types."""
