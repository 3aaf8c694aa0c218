"""Junk bay: a deterministic voice-adventure command engine."""

__version__ = "0.1.0"
