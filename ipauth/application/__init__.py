"""Application layer: commands, queries, DTOs and their handlers."""
