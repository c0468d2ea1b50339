"""Authentication schemas."""

from typing import Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, field_validator

from app.utils.validators import is_blank

INVALID_EMAIL = "Please include a valid email"


def _check_email(v):
    if not isinstance(v, str):
        raise ValueError(INVALID_EMAIL)
    try:
        validate_email(v.strip(), check_deliverability=False)
    except EmailNotValidError:
        raise ValueError(INVALID_EMAIL)
    return v.strip()


class RegisterRequest(BaseModel):
    """Register request schema."""

    model_config = ConfigDict(validate_default=True)

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, v):
        if is_blank(v):
            raise ValueError("Name is required")
        return v.strip() if isinstance(v, str) else v

    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, v):
        return _check_email(v)

    @field_validator("password", mode="before")
    @classmethod
    def check_password(cls, v):
        if not isinstance(v, str) or len(v) < 6:
            raise ValueError("Please enter a password with 6 or more characters")
        return v


class LoginRequest(BaseModel):
    """Login request schema."""

    model_config = ConfigDict(validate_default=True)

    email: Optional[str] = None
    password: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def check_email(cls, v):
        return _check_email(v)

    @field_validator("password", mode="before")
    @classmethod
    def check_password(cls, v):
        if is_blank(v):
            raise ValueError("Password is required")
        return v


class TokenResponse(BaseModel):
    token: str
