"""Shared fixtures (no tests here)."""
