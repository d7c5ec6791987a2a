"""Adapters implementing ROA's storage and id ports."""
