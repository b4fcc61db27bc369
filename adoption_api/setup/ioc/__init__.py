"""Dependency injection wiring (Dishka)."""
