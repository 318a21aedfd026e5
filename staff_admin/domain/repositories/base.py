"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import TypeVar, Optional, Any, Protocol

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic find/save/delete operations."""

    def get_by_id(self, id: str) -> Optional[T]:
        """Get a single entity by ID."""
        ...

    def update(self, db_obj: T, obj_in: Any) -> T:
        """Apply the given fields to an existing entity and save it."""
        ...

    def delete(self, id: str) -> Optional[T]:
        """Delete an entity by ID, returning it if it existed."""
        ...
