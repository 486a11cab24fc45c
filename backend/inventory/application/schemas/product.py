"""Pydantic DTOs (Data Transfer Objects) for the Product feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    """Schema for adding a product — only the name is required."""

    model_config = {"str_strip_whitespace": True}

    name: str = Field(..., min_length=1, max_length=255, examples=["Coffee beans"])
    price: int = Field(0, examples=[12])
    image_id: str | None = Field(None, max_length=36)


class ProductUpdate(BaseModel):
    """Schema for editing a product — replaces every mutable field."""

    model_config = {"str_strip_whitespace": True}

    name: str = Field(..., min_length=1, max_length=255)
    price: int = 0
    image_id: str | None = Field(None, max_length=36)


class ProductResponse(BaseModel):
    id: str
    name: str
    price: int
    image_id: str | None
    image_url: str | None
    created_at: datetime
    updated_at: datetime
