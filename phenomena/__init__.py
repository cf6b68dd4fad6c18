"""Phenomena: incident reports with time-boxed discussion threads."""

__version__ = "0.1.0"
