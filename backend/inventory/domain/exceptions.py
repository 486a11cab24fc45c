"""Domain-specific exceptions — framework-independent."""

from inventory.domain.entities.pokemon import FetchErrorKind


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class PokemonFetchError(Exception):
    """Raised when the Pokémon API could not produce a usable record.

    ``kind`` separates transport problems from unknown names and from
    bodies that do not decode into a Pokémon.
    """

    def __init__(
        self,
        kind: FetchErrorKind,
        name: str,
        message: str,
        status_code: int | None = None,
    ):
        self.kind = kind
        self.name = name
        self.message = message
        self.status_code = status_code
        super().__init__(f"[{kind.value}] {name!r}: {message}")


class ImageRejectedError(Exception):
    """Base class for uploads the image storage refuses to keep."""

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f"Image '{filename}' rejected: {reason}")


class UnsupportedImageError(ImageRejectedError):
    """Raised when an upload is not an image."""

    def __init__(self, filename: str, content_type: str):
        self.content_type = content_type
        super().__init__(filename, f"unsupported content type '{content_type}'")


class ImageTooLargeError(ImageRejectedError):
    """Raised when an upload exceeds the configured size limit."""

    def __init__(self, filename: str, size: int, max_size: int):
        self.size = size
        self.max_size = max_size
        super().__init__(filename, f"{size} bytes exceeds the {max_size} byte limit")
