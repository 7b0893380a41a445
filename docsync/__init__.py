"""Synchronize generated component documentation with component sources."""

__version__ = "0.1.0"
