"""A four-player Euchre card game with simple computer players and human players."""

__version__ = "0.1.0"