"""Small guessing games: Le juste prix, and Mastermind for the terminal and the browser."""

__version__ = "0.1.0"
__all__ = ["__version__"]