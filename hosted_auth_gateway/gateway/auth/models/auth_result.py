from typing import Optional

from pydantic import BaseModel, ConfigDict


class AuthErrorDetail(BaseModel):
    """Opaque failure payload reported by the identity provider."""

    model_config = ConfigDict(frozen=True)

    # None when the provider could not be reached at all
    status_code: Optional[int] = None
    code: Optional[str] = None
    message: Optional[str] = None


class AuthSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)


class AuthFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    error: AuthErrorDetail


AuthResult = AuthSuccess | AuthFailure
