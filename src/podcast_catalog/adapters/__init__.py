"""Adapters for the core interfaces."""
