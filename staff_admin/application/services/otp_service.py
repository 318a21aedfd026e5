"""OTP helpers and the staff notification seam (SMS/e-mail delivery)."""

from datetime import datetime, timedelta, timezone
from typing import Protocol

import structlog

from staff_admin.domain.models.staff_user import StaffUser

logger = structlog.get_logger(__name__)


def get_otp_expiry(minutes: int = 10) -> datetime:
    """Timestamp at which a freshly issued one-time passcode expires."""
    return datetime.now(timezone.utc) + timedelta(minutes=minutes)


class StaffNotifier(Protocol):
    """Delivers signup notifications (OTP by SMS or e-mail) to new staff."""

    def staff_created(self, user: StaffUser, sms_type: str) -> None:
        ...


class DisabledStaffNotifier:
    """Default notifier: OTP dispatch is switched off in this deployment."""

    def staff_created(self, user: StaffUser, sms_type: str) -> None:
        logger.info(
            "OTP dispatch disabled, skipping notification",
            staff_id=user.id,
            sms_type=sms_type,
        )
