"""
SQLAlchemy Implementation of Staff Repository.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError

from staff_admin.domain.models.staff_user import StaffUser
from staff_admin.domain.repositories.staff_repository import StaffRepository
from staff_admin.infrastructure.repositories.base_repository import SQLAlchemyRepository

# A reused unverified row starts over like a fresh insert
SIGNUP_RESET = {"feedback": None, "rating": None, "holiday_dates": []}


class SQLAlchemyStaffRepository(SQLAlchemyRepository[StaffUser], StaffRepository):
    """Staff repository implementation using SQLAlchemy."""

    def list_by_role(self, role: str) -> List[StaffUser]:
        return list(self.db.scalars(select(StaffUser).where(StaffUser.role == role)))

    def register_verified(self, values: Dict[str, Any]) -> Optional[StaffUser]:
        phone_number = values["phone_number"]
        values = {**values, "is_verified": True}

        # Claim a pending unverified record first; the WHERE clause makes this atomic
        result = self.db.execute(
            update(StaffUser)
            .where(
                StaffUser.phone_number == phone_number,
                StaffUser.is_verified.is_(False),
            )
            .values(**{**SIGNUP_RESET, **values})
            .execution_options(synchronize_session=False)
        )
        if result.rowcount:
            self.db.commit()
            return self.db.scalars(
                select(StaffUser)
                .where(StaffUser.phone_number == phone_number)
                .execution_options(populate_existing=True)
            ).one()

        user = StaffUser(**values)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # phone_number is UNIQUE: a verified user already holds it
            self.db.rollback()
            return None
        self.db.refresh(user)
        return user
