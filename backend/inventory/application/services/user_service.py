"""Application service (use case) for user records."""

from inventory.application.interfaces import RecordStore
from inventory.domain.entities import ImageHandle, UserRecord
from inventory.domain.exceptions import EntityNotFoundError


class UserService:
    """Orchestrates user add/edit/delete. Depends on the record store port (DI).

    Presence checks on the fields belong to the caller; the service stores
    whatever it is given.
    """

    def __init__(self, store: RecordStore[UserRecord]):
        self._store = store

    @property
    def store(self) -> RecordStore[UserRecord]:
        return self._store

    def get_user(self, user_id: str) -> UserRecord:
        user = self._store.get(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    def list_users(self) -> tuple[UserRecord, ...]:
        return self._store.list()

    def user_count(self) -> int:
        return len(self._store)

    def add_user(
        self,
        username: str,
        pincode: str,
        profile_image: ImageHandle | None = None,
    ) -> str:
        return self._store.add(
            username=username, pincode=pincode, profile_image=profile_image
        )

    def edit_user(
        self,
        user_id: str,
        username: str,
        pincode: str,
        profile_image: ImageHandle | None,
    ) -> UserRecord:
        """Replace all mutable fields of a user.

        Raises:
            EntityNotFoundError: No user has this id; nothing was changed.
        """
        found = self._store.edit(
            user_id, username=username, pincode=pincode, profile_image=profile_image
        )
        if not found:
            raise EntityNotFoundError("User", user_id)
        return self.get_user(user_id)

    def set_profile_image(self, user_id: str, profile_image: ImageHandle | None) -> UserRecord:
        """Swap only the profile image, keeping username and pincode."""
        user = self.get_user(user_id)
        return self.edit_user(user_id, user.username, user.pincode, profile_image)

    def delete_user(self, user_id: str) -> bool:
        """Remove a user. Returns False when no user matched (a no-op)."""
        return self._store.delete(user_id) > 0
