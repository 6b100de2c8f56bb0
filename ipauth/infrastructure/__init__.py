"""Infrastructure adapters (persistence, security, logging)."""
