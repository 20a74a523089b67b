"""A side-scrolling rabbit jumping game with window-free game logic, and a number guessing game."""

__version__ = "0.1.0"