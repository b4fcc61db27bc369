"""Application setup (DI container)."""
