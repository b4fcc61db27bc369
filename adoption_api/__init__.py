"""Animal adoption backend: listings with pictures and two-party direct messages."""

__version__ = "1.0.0"
