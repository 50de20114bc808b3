"""Keep, save and search a board of educational opportunities from the terminal."""

__version__ = "0.1.0"
__all__ = ["__version__"]