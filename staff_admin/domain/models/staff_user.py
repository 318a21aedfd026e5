"""StaffUser domain model — maps to the 'staff_users' table."""

import uuid

from sqlalchemy import JSON, Boolean, Column, DateTime, Float, String, Text
from sqlalchemy.sql import func

from staff_admin.infrastructure.database import Base


def generate_id() -> str:
    return uuid.uuid4().hex


class StaffUser(Base):
    __tablename__ = "staff_users"

    id = Column(String(32), primary_key=True, default=generate_id)
    phone_number = Column(String(32), unique=True, nullable=False, index=True)
    username = Column(String(200), nullable=True)
    role = Column(String(50), nullable=False, default="staff", index=True)  # staff, admin
    is_verified = Column(Boolean, nullable=False, default=False)
    is_on_holiday = Column(Boolean, nullable=False, default=False)
    working_hours = Column(JSON, nullable=False)  # {"start": "09:00:00", "end": "17:00:00"}
    holiday_dates = Column(JSON, nullable=False, default=list)
    services = Column(JSON, nullable=False, default=list)
    feedback = Column(Text, nullable=True)
    rating = Column(Float, nullable=True)
    otp_expiry = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def __repr__(self):
        return f"<StaffUser {self.phone_number} ({self.role})>"
