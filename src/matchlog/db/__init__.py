"""Relational persistence: SQLAlchemy schema and engine/session helpers."""
