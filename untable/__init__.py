"""Rules engine and terminal host for a four-player shedding card game."""

__version__ = "0.1.0"
