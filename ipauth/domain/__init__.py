"""Domain layer: entities, value types and ports."""
