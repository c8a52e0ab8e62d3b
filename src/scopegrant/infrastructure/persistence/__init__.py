"""Persistence layer: database management, models and repositories."""
