"""Wealth projection engine and its JSON API."""

__version__ = "0.1.0"
