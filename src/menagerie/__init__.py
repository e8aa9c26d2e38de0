"""Menagerie – filter and annotate nested region / people / animal trees."""

__version__ = "0.1.0"
