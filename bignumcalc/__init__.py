"""Arbitrary-precision integer calculator working digit by digit."""

__version__ = "0.1.0"