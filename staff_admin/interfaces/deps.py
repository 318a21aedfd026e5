"""
API Dependencies.
"""

from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from staff_admin.config import Settings
from staff_admin.application.services.otp_service import StaffNotifier
from staff_admin.domain.models.staff_user import StaffUser
from staff_admin.domain.repositories.staff_repository import StaffRepository
from staff_admin.infrastructure.repositories.staff_repository import SQLAlchemyStaffRepository


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Generator[Session, None, None]:
    """One session per request, from the store opened at startup."""
    yield from request.app.state.database.session()


def get_staff_repository(db: Session = Depends(get_db)) -> StaffRepository:
    """Get staff repository instance."""
    return SQLAlchemyStaffRepository(db, StaffUser)


def get_notifier(request: Request) -> StaffNotifier:
    return request.app.state.notifier
