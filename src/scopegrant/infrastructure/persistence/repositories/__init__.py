"""Persistence repositories for database operations."""
