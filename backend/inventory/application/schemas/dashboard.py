"""Pydantic schema for the dashboard summary."""

from pydantic import BaseModel

from .user import UserResponse


class DashboardResponse(BaseModel):
    user_count: int
    product_count: int
    users: list[UserResponse]
