"""WordGrep - search Word documents for literal text."""

__version__ = "0.1.0"
