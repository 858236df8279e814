"""Artwork Browser: a remotely paginated table with cross-page selection."""

__version__ = "0.1.0"
