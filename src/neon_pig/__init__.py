"""Neon Pig: the dice game Pig against a Gemini-driven opponent."""

__version__ = "0.1.0"
