"""Pydantic DTOs (Data Transfer Objects) for the User feature."""

from datetime import datetime

from pydantic import BaseModel, Field, SecretStr


class UserCreate(BaseModel):
    """Schema for adding a user — username and pincode are both required."""

    model_config = {"str_strip_whitespace": True}

    username: str = Field(..., min_length=1, max_length=100, examples=["alice"])
    pincode: str = Field(..., min_length=1, max_length=32, examples=["1234"])
    profile_image_id: str | None = Field(None, max_length=36)


class UserUpdate(BaseModel):
    """Schema for editing a user — replaces every mutable field."""

    model_config = {"str_strip_whitespace": True}

    username: str = Field(..., min_length=1, max_length=100)
    pincode: str = Field(..., min_length=1, max_length=32)
    profile_image_id: str | None = Field(None, max_length=36)


class UserResponse(BaseModel):
    """Schema returned to the client. The pincode is masked on output."""

    id: str
    username: str
    pincode: SecretStr
    profile_image_id: str | None
    profile_image_url: str | None
    created_at: datetime
    updated_at: datetime
