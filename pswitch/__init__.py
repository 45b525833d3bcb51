"""p — personal project switcher."""

__version__ = "0.1.0"
