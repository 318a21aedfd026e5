"""Staff service — business logic for admin-managed staff accounts."""

from typing import List, Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError

from staff_admin.application.services.otp_service import StaffNotifier, get_otp_expiry
from staff_admin.core.exceptions import (
    BadInputException,
    ConflictException,
    EntityNotFoundException,
    ServerErrorException,
)
from staff_admin.domain.models.staff_user import StaffUser
from staff_admin.domain.repositories.staff_repository import StaffRepository
from staff_admin.domain.schemas.staff import StaffCreate, StaffUpdate

logger = structlog.get_logger(__name__)

STAFF_ROLE = "staff"
SIGNUP_SMS_TYPE = "SIGNUP BY ADMIN"


def create_staff(
    repo: StaffRepository,
    body: StaffCreate,
    notifier: StaffNotifier,
    otp_expiry_minutes: int = 10,
) -> StaffUser:
    """Sign up a staff user on behalf of an admin. The account starts verified."""
    values = {
        "phone_number": body.phone_number,
        "username": body.username,
        "services": body.services,
        "working_hours": body.working_hours.model_dump(mode="json"),
        "role": STAFF_ROLE,
        "is_on_holiday": False,
        "otp_expiry": get_otp_expiry(otp_expiry_minutes),
    }

    try:
        user = repo.register_verified(values)
    except SQLAlchemyError:
        logger.exception("Error signing up user")
        raise ServerErrorException("Error signing up user")

    if user is None:
        logger.info("Signup rejected, phone number already verified")
        raise ConflictException("User already exists and is verified", code="user_exists")

    logger.info("Staff user created", staff_id=user.id)
    notifier.staff_created(user, SIGNUP_SMS_TYPE)
    return user


def list_staff(repo: StaffRepository) -> List[StaffUser]:
    try:
        return repo.list_by_role(STAFF_ROLE)
    except SQLAlchemyError:
        logger.exception("Error fetching staff users")
        raise ServerErrorException("Error fetching staff users")


def update_staff(repo: StaffRepository, user_id: Optional[str], body: StaffUpdate) -> StaffUser:
    """Apply a partial update: only fields present in the body are overwritten."""
    changes = body.changes()
    try:
        user = repo.get_by_id(user_id) if user_id else None
        if user is None:
            raise EntityNotFoundException("User not found")
        user = repo.update(user, changes)
    except SQLAlchemyError:
        logger.exception("Error updating user", staff_id=user_id)
        raise ServerErrorException("Error updating user")

    logger.info("Staff user updated", staff_id=user.id, fields=sorted(changes))
    return user


def delete_staff(repo: StaffRepository, user_id: Optional[str]) -> None:
    if not user_id:
        raise BadInputException("User ID is required.", code="missing_id")

    try:
        deleted = repo.delete(user_id)
    except SQLAlchemyError:
        logger.exception("Error deleting user", staff_id=user_id)
        raise ServerErrorException("Error deleting user")

    if deleted is None:
        raise EntityNotFoundException("User not found.")
    logger.info("Staff user deleted", staff_id=user_id)
