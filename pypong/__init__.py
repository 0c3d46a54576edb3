"""A two-player Pong game: game rules, keyboard handling and pygame drawing."""

__version__ = "0.1.0"