"""Pydantic schemas for uploaded images."""

from pydantic import BaseModel


class ImageResponse(BaseModel):
    id: str
    filename: str
    content_type: str
    file_size: int
    url: str
