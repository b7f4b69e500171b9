"""Test suite for the contest portal.

Test structure:
- unit/: Unit tests - domain logic, handlers and adapters in isolation
- api/: API endpoint tests - HTTP cycle against the app with overridden
  dependencies
- utils/: Shared entity factories and in-memory repository doubles
"""
