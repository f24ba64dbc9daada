"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re

from pydantic import field_validator

from community.domain.value.common import RootValueObject, ValueObject


class Username(RootValueObject[str]):
    """Public display name of an account.

    Unique across accounts; also snapshotted onto comments.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not blank and within length limits."""
        if not v.strip():
            raise ValueError("Username must not be blank")
        if len(v) > 50:
            raise ValueError("Username must be at most 50 characters")
        return v


class Slug(RootValueObject[str]):
    """URL-safe key of a post.

    Must be lowercase alphanumeric with hyphens, 1-100 characters.
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 100:
            raise ValueError("Slug must be 1-100 characters")
        return v


class ExternalProfile(ValueObject):
    """Identity asserted by the external OAuth provider (Google)."""

    external_id: str  # Stable provider subject id
    email: str
    display_name: str = ""
