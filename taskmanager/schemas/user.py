from datetime import datetime

from pydantic import ConfigDict, EmailStr, Field, field_serializer, field_validator

from taskmanager.schemas.base import CamelModel, format_utc
from taskmanager.utils.auth import BCRYPT_MAX_BYTES

MIN_PASSWORD_LENGTH = 6


class UserCreate(CamelModel):
    email: EmailStr
    password: str

    @field_validator("password")
    @classmethod
    def password_length(cls, v: str) -> str:
        """Require 6+ characters and stay within bcrypt's 72-byte limit."""
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"password must be at least {MIN_PASSWORD_LENGTH} characters long")
        if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError("password too long: must be at most 72 bytes when UTF-8 encoded")
        return v


class UserLogin(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)


class UserOut(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_utc(self, value: datetime) -> str:
        return format_utc(value)
