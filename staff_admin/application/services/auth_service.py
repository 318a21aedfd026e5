"""Auth service — bearer token minting and verification."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Mapping, Optional, Union

import structlog
from jose import JWTError, jwt
from pydantic import ValidationError

from staff_admin.config import Settings, get_settings
from staff_admin.domain.schemas.auth import AuthClaim

logger = structlog.get_logger(__name__)

BEARER_PREFIX = "Bearer "
TOKEN_COOKIE = "token"


@dataclass(frozen=True)
class ValidToken:
    claim: AuthClaim


@dataclass(frozen=True)
class MissingToken:
    pass


@dataclass(frozen=True)
class InvalidToken:
    reason: str


TokenOutcome = Union[ValidToken, MissingToken, InvalidToken]


def create_access_token(
    data: dict,
    expires_delta: Optional[timedelta] = None,
    settings: Optional[Settings] = None,
) -> str:
    settings = settings or get_settings()
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.JWT_EXPIRATION_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.TOKEN_SECRET, algorithm=settings.JWT_ALGORITHM)


def extract_token(authorization: Optional[str], cookie: Optional[str]) -> Optional[str]:
    """Authorization header first, ``token`` cookie as fallback."""
    if authorization and authorization.startswith(BEARER_PREFIX):
        token = authorization[len(BEARER_PREFIX):].strip()
    else:
        token = cookie
    return token or None


def verify_token(token: Optional[str], settings: Optional[Settings] = None) -> TokenOutcome:
    """Decode and verify a token. Never raises; failures come back as outcomes."""
    if not token:
        logger.warning("No authorization token found")
        return MissingToken()

    settings = settings or get_settings()
    try:
        payload = jwt.decode(token, settings.TOKEN_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as e:
        logger.error("Token verification error", reason=str(e))
        return InvalidToken(reason=str(e))

    if not isinstance(payload, Mapping):
        logger.error("Token verification error", reason="payload is not an object")
        return InvalidToken(reason="Invalid token payload.")

    try:
        claim = AuthClaim.model_validate(dict(payload))
    except ValidationError as e:
        logger.error("Token verification error", reason="malformed claims", errors=e.error_count())
        return InvalidToken(reason="Invalid token claims.")

    return ValidToken(claim=claim)
