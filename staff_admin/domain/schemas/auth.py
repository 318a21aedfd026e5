"""Pydantic schemas for token claims."""

from typing import Optional

from pydantic import BaseModel


class AuthClaim(BaseModel):
    """Decoded token payload. Unknown claims are kept as extra fields."""

    sub: Optional[str] = None
    role: Optional[str] = None
    exp: Optional[float] = None

    model_config = {"extra": "allow"}

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
