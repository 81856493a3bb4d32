"""Persistence layer for the entity store document."""
