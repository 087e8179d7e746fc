"""Outdoor creature scaling for continent maps."""

__version__ = "0.1.0"
