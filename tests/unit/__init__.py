"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real database or network; in-memory repositories and fakes only.
- Prefer behavior-centric assertions over implementation details.
"""
