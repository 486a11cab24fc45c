"""Opaque reference to an image chosen by the user."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ImageHandle:
    """Points at stored image data without exposing it.

    Records only carry the handle around; nothing in the domain reads the
    bytes behind it.
    """

    id: str
    content_type: str = "application/octet-stream"
