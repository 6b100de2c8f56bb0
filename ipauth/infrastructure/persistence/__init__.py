"""SQLAlchemy async persistence for accounts."""
