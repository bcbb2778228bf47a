"""Domain value objects for the gallery.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from gallery.domain.value.common import RootValueObject

# Palette offered by the lightbox reaction picker.
DEFAULT_REACTIONS = ("👍", "❤️", "😂", "😮", "😢")


class UserRole(str, Enum):
    """Role granted by the identity provider."""

    ADMIN = "admin"
    USER = "user"


class Emoji(RootValueObject[str]):
    """Reaction key.

    Any short token without whitespace is accepted, not only the palette.
    """

    @field_validator("root")
    @classmethod
    def validate_emoji(cls, v: str) -> str:
        if len(v) < 1 or len(v) > 32:
            raise ValueError("Emoji must be 1-32 characters")
        if any(ch.isspace() for ch in v):
            raise ValueError("Emoji must not contain whitespace")
        return v


class AuthorName(RootValueObject[str]):
    """Display name captured when a comment is posted."""

    @field_validator("root")
    @classmethod
    def validate_author_name(cls, v: str) -> str:
        if len(v.strip()) < 1 or len(v) > 255:
            raise ValueError("Author name must be 1-255 characters")
        return v
