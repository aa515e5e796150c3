"""Shark Tank company tracker: catalog, mock refresh and refresh scheduler."""

__version__ = "0.1.0"
