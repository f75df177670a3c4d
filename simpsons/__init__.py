"""Terminal widgets, key events and screens for coding-assistant session history."""

__version__ = "0.1.0"