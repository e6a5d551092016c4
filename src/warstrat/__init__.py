"""Strategy tournaments for the card game War."""

__version__ = "0.1.0"
