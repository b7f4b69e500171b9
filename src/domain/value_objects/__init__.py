"""Domain value objects.

Immutable value objects passed between layers.
"""

from src.domain.value_objects.session_context import SessionContext

__all__ = [
    "SessionContext",
]
