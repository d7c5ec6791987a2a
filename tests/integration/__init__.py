"""Integration tests against SQLite databases."""
