"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import TypeVar, Optional, Any, Protocol

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for create-and-read operations. Nothing in scope updates or deletes."""

    def get_by_id(self, id: int) -> Optional[T]:
        """Get a single entity by ID."""
        ...

    def create(self, obj_in: Any) -> T:
        """Create a new entity, stamping its creation time."""
        ...
