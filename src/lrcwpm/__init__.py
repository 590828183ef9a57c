"""lrcwpm - estimate singing tempo (words per minute) from synced lyrics."""

__version__ = "0.1.0"
