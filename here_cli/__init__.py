"""here: grab and copy file locations from the terminal."""

__version__ = "0.1.0"
