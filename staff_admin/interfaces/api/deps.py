"""FastAPI dependency — bearer/cookie token auth."""

from typing import Optional

from fastapi import Cookie, Depends, Header

from staff_admin.config import Settings
from staff_admin.application.services.auth_service import (
    ValidToken,
    extract_token,
    verify_token,
)
from staff_admin.core.exceptions import ForbiddenException, UnauthorizedException
from staff_admin.domain.schemas.auth import AuthClaim
from staff_admin.interfaces.deps import get_app_settings


def get_current_claim(
    authorization: Optional[str] = Header(default=None),
    token: Optional[str] = Cookie(default=None),
    settings: Settings = Depends(get_app_settings),
) -> AuthClaim:
    """Resolve the caller's claim from the Authorization header or token cookie."""
    outcome = verify_token(extract_token(authorization, token), settings)
    if not isinstance(outcome, ValidToken):
        raise UnauthorizedException()
    return outcome.claim


def require_admin(claim: AuthClaim = Depends(get_current_claim)) -> AuthClaim:
    """Require admin role."""
    if not claim.is_admin:
        raise ForbiddenException()
    return claim
