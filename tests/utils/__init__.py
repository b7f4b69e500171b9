"""Shared test helpers (entity factories and in-memory doubles)."""
