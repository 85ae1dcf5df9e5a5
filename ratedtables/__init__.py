"""Keyed record tables that count the cost of their operations."""

__version__ = "0.1.0"
__all__ = ["records", "marks", "tables", "testkit"]