"""
Staff Repository Interface.
Defines specific data access operations for staff users.
"""

from typing import Any, Dict, List, Optional

from staff_admin.domain.repositories.base import BaseRepository
from staff_admin.domain.models.staff_user import StaffUser


class StaffRepository(BaseRepository[StaffUser]):
    """Interface for StaffUser-specific operations."""

    def list_by_role(self, role: str) -> List[StaffUser]:
        """Get every user with the given role, in store order."""
        ...

    def register_verified(self, values: Dict[str, Any]) -> Optional[StaffUser]:
        """
        Store a verified user in a single conditional write.

        An unverified record holding the same phone number is reused, with
        the fields a signup does not supply reset to their defaults.
        Returns None when a verified user already owns the phone number.
        """
        ...
