from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from staff_admin.application.services.auth_service import create_access_token
from staff_admin.config import Settings
from staff_admin.domain.models.staff_user import StaffUser
from staff_admin.infrastructure.database import Database
from staff_admin.main import create_app

TEST_SECRET = "tests-secret-key"


class RecordingNotifier:
    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []

    def staff_created(self, user: StaffUser, sms_type: str) -> None:
        self.sent.append((user.phone_number, sms_type))


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite:///{tmp_path / 'staff.sqlite3'}",
        TOKEN_SECRET=TEST_SECRET,
        ENVIRONMENT="test",
    )


@pytest.fixture()
def database(settings: Settings) -> Iterator[Database]:
    db = Database(settings.DATABASE_URL)
    db.initialize()
    yield db
    db.dispose()


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def app(settings: Settings, database: Database, notifier: RecordingNotifier):
    return create_app(settings=settings, database=database, notifier=notifier)


@pytest.fixture()
def client(app) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def admin_headers(settings: Settings) -> dict[str, str]:
    token = create_access_token({"sub": "admin-1", "role": "admin"}, settings=settings)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def staff_headers(settings: Settings) -> dict[str, str]:
    token = create_access_token({"sub": "staff-1", "role": "staff"}, settings=settings)
    return {"Authorization": f"Bearer {token}"}


def make_staff(database: Database, **overrides) -> StaffUser:
    values = {
        "phone_number": "+15550000001",
        "username": "jane",
        "role": "staff",
        "is_verified": True,
        "is_on_holiday": False,
        "working_hours": {"start": "09:00:00", "end": "17:00:00"},
        "holiday_dates": ["2026-12-25"],
        "services": ["haircut"],
        "feedback": "punctual",
        "rating": 3.5,
    }
    values.update(overrides)
    with database.SessionLocal() as db:
        user = StaffUser(**values)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user


def load_staff(database: Database, user_id: str) -> StaffUser | None:
    with database.SessionLocal() as db:
        return db.get(StaffUser, user_id)


def count_staff(database: Database) -> int:
    with database.SessionLocal() as db:
        return db.query(StaffUser).count()
