"""Admin staff API routes — create, list, update and delete staff users."""

from typing import Optional

from fastapi import APIRouter, Depends, status

from staff_admin.config import Settings
from staff_admin.application.services.otp_service import StaffNotifier
from staff_admin.application.services.staff_service import (
    create_staff,
    delete_staff,
    list_staff,
    update_staff,
)
from staff_admin.domain.repositories.staff_repository import StaffRepository
from staff_admin.domain.schemas.auth import AuthClaim
from staff_admin.domain.schemas.staff import (
    MessageResponse,
    StaffCreate,
    StaffListResponse,
    StaffRead,
    StaffUpdate,
)
from staff_admin.interfaces.api.deps import get_current_claim, require_admin
from staff_admin.interfaces.deps import get_app_settings, get_notifier, get_staff_repository

router = APIRouter(prefix="/api/admin/staff", tags=["Admin Staff"])


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def signup_staff(
    body: StaffCreate,
    claim: AuthClaim = Depends(get_current_claim),
    repo: StaffRepository = Depends(get_staff_repository),
    notifier: StaffNotifier = Depends(get_notifier),
    settings: Settings = Depends(get_app_settings),
):
    create_staff(repo, body, notifier, settings.OTP_EXPIRY_MINUTES)
    return MessageResponse(message="Signup by admin successfully!")


@router.get("", response_model=StaffListResponse)
def get_staff(
    claim: AuthClaim = Depends(get_current_claim),
    repo: StaffRepository = Depends(get_staff_repository),
):
    staff = list_staff(repo)
    return StaffListResponse(staff=[StaffRead.model_validate(u) for u in staff])


@router.patch("", response_model=MessageResponse)
def patch_staff(
    body: StaffUpdate,
    id: Optional[str] = None,
    claim: AuthClaim = Depends(get_current_claim),
    repo: StaffRepository = Depends(get_staff_repository),
):
    update_staff(repo, id, body)
    return MessageResponse(message="User updated successfully!")


@router.delete("", response_model=MessageResponse)
def remove_staff(
    id: Optional[str] = None,
    claim: AuthClaim = Depends(require_admin),
    repo: StaffRepository = Depends(get_staff_repository),
):
    delete_staff(repo, id)
    return MessageResponse(message="User deleted successfully.")
