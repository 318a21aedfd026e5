from __future__ import annotations

from typing import Iterator

import pytest
from sqlalchemy.orm import Session

from staff_admin.domain.models.staff_user import StaffUser
from staff_admin.infrastructure.database import Database
from staff_admin.infrastructure.repositories.staff_repository import SQLAlchemyStaffRepository

from conftest import make_staff


@pytest.fixture()
def session(database: Database) -> Iterator[Session]:
    yield from database.session()


@pytest.fixture()
def repo(session: Session) -> SQLAlchemyStaffRepository:
    return SQLAlchemyStaffRepository(session, StaffUser)


def signup_values(phone_number: str = "+15559990000") -> dict:
    return {
        "phone_number": phone_number,
        "username": "alex",
        "services": ["nails"],
        "working_hours": {"start": "08:00:00", "end": "16:00:00"},
        "role": "staff",
        "is_on_holiday": False,
    }


def test_register_verified_inserts_new_record(repo: SQLAlchemyStaffRepository) -> None:
    user = repo.register_verified(signup_values())

    assert user is not None
    assert len(user.id) == 32
    assert user.is_verified is True
    assert repo.get_by_id(user.id).phone_number == "+15559990000"


def test_register_verified_returns_none_for_verified_duplicate(
    database: Database, repo: SQLAlchemyStaffRepository
) -> None:
    existing = make_staff(database, phone_number="+15559990000", username="first")

    assert repo.register_verified(signup_values()) is None
    assert repo.get_by_id(existing.id).username == "first"
    assert len(repo.list_by_role("staff")) == 1


def test_register_verified_claims_unverified_record(
    database: Database, repo: SQLAlchemyStaffRepository
) -> None:
    pending = make_staff(
        database,
        phone_number="+15559990000",
        is_verified=False,
        rating=2.0,
        feedback="old note",
        holiday_dates=["2020-01-01"],
    )

    user = repo.register_verified(signup_values())

    assert user.id == pending.id
    assert user.is_verified is True
    assert user.username == "alex"
    assert user.rating is None
    assert user.feedback is None
    assert user.holiday_dates == []


def test_list_by_role(database: Database, repo: SQLAlchemyStaffRepository) -> None:
    make_staff(database, phone_number="+1")
    make_staff(database, phone_number="+2", role="admin")

    assert [u.phone_number for u in repo.list_by_role("staff")] == ["+1"]
    assert [u.phone_number for u in repo.list_by_role("admin")] == ["+2"]


def test_update_and_delete(database: Database, repo: SQLAlchemyStaffRepository) -> None:
    user = make_staff(database)

    updated = repo.update(repo.get_by_id(user.id), {"rating": 5.0, "not_a_column": 1})
    assert updated.rating == 5.0

    deleted = repo.delete(user.id)
    assert deleted.id == user.id
    assert repo.get_by_id(user.id) is None
    assert repo.delete(user.id) is None
