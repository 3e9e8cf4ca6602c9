"""Spindle speed and feed rate recommendations for milling cutters."""

__version__ = "0.1.0"
