"""External-facing routers.

- system: non-versioned root and health endpoints
- api/v1: versioned REST resources
"""

from src.presentation.routers.system import system_router

__all__ = ["system_router"]
