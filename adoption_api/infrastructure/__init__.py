"""Infrastructure Layer - adapters for external systems (database)."""
