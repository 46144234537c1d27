"""Interactive author application forms and the book catalogue of a fictional company."""

__version__ = "1.0.0"