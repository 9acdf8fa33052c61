"""Account and session schemas."""

from typing import Optional

from pydantic import Field, field_validator

from pms.models.enums import UserRole
from pms.schemas.base import BaseSchema


class LoginRequest(BaseSchema):
    email: str


class RegisterRequest(BaseSchema):
    """Self-service sign-up for tenants and agents."""

    name: str = ""
    email: str = ""
    password: str = ""
    role: UserRole = UserRole.TENANT
    phone: Optional[str] = None

    @field_validator("role")
    @classmethod
    def no_admin_signup(cls, value: UserRole) -> UserRole:
        if value == UserRole.ADMIN:
            raise ValueError("Admin accounts cannot be self-registered")
        return value


class SocialLoginRequest(BaseSchema):
    provider: str = Field(..., min_length=1, max_length=32)


class ProfileUpdate(BaseSchema):
    name: Optional[str] = None
    phone: Optional[str] = None
