"""Domain entity for a user managed from the mobile client."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .image_handle import ImageHandle


@dataclass
class UserRecord:
    """A user entry held by the user store.

    ``id`` is assigned by the store when the record is added and is never
    changed afterwards.
    """

    id: str
    username: str
    pincode: str
    profile_image: ImageHandle | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(
        self,
        *,
        username: str,
        pincode: str,
        profile_image: ImageHandle | None,
    ) -> None:
        """Replace every mutable field and refresh the updated_at timestamp."""
        self.username = username
        self.pincode = pincode
        self.profile_image = profile_image
        self.updated_at = datetime.now(timezone.utc)
