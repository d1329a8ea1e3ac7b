"""Paginated, favoritable podcast catalog."""

__version__ = "0.1.0"
