"""Heads-up Texas Hold'em decision engine."""

__version__ = "0.1.0"
