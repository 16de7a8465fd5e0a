from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator
from marketplace.models.user import OnlineStatus
from marketplace.schemas.user import UserOut


def _validate_password_length(value: str) -> str:
    if len(value.encode("utf-8")) > 72:
        raise ValueError("Password too long (max 72 bytes)")
    return value


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    full_name: str = Field(..., min_length=1, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=32)

    @field_validator("password")
    @classmethod
    def check_password_length(cls, value: str) -> str:
        return _validate_password_length(value)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str

    @field_validator("password")
    @classmethod
    def check_password_length(cls, value: str) -> str:
        return _validate_password_length(value)


class AuthResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    user: UserOut


class UpdateProfileRequest(BaseModel):
    full_name: Optional[str] = Field(default=None, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=32)
    profile_picture: Optional[str] = None
    online_status: Optional[OnlineStatus] = None
    bio: Optional[str] = Field(default=None, max_length=2000)


class Message(BaseModel):
    message: str
