"""Pydantic schemas for StaffUser. Wire format is camelCase."""

from datetime import date, datetime, time
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

CAMEL_CONFIG = {"alias_generator": to_camel, "populate_by_name": True}


class WorkingHours(BaseModel):
    start: time
    end: time


class StaffCreate(BaseModel):
    phone_number: str = Field(min_length=1, max_length=32)
    username: Optional[str] = Field(default=None, max_length=200)
    services: list[str] = Field(default_factory=list)
    working_hours: WorkingHours

    model_config = CAMEL_CONFIG


class StaffUpdate(BaseModel):
    """Partial update. Only fields present in the request body are applied."""

    username: Optional[str] = Field(default=None, max_length=200)
    services: Optional[list[str]] = None
    is_on_holiday: Optional[bool] = None
    working_hours: Optional[WorkingHours] = None
    holiday_dates: Optional[list[date]] = None
    role: Optional[str] = Field(default=None, max_length=50)
    feedback: Optional[str] = None
    rating: Optional[float] = None

    model_config = CAMEL_CONFIG

    @field_validator("services", "is_on_holiday", "working_hours", "holiday_dates", "role")
    @classmethod
    def reject_null(cls, value):
        # These columns are NOT NULL; an explicit null is a bad request
        if value is None:
            raise ValueError("may not be null")
        return value

    def changes(self) -> dict:
        """Fields the client actually sent, JSON-ready for the store."""
        return self.model_dump(exclude_unset=True, mode="json")


class StaffRead(BaseModel):
    id: str
    phone_number: str
    username: Optional[str] = None
    role: str
    is_verified: bool
    is_on_holiday: bool
    working_hours: Optional[WorkingHours] = None
    holiday_dates: list[date] = Field(default_factory=list)
    services: list[str] = Field(default_factory=list)
    feedback: Optional[str] = None
    rating: Optional[float] = None
    otp_expiry: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {**CAMEL_CONFIG, "from_attributes": True}


class StaffListResponse(BaseModel):
    staff: list[StaffRead]


class MessageResponse(BaseModel):
    message: str
