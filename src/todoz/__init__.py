"""todoz: a small interactive to-do list manager for the terminal."""

__version__ = "0.3.0"
