"""
emorand - prints a random emoji to stdout.
"""

__version__ = "1.0.0"
