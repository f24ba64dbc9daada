"""User aggregate root.

Users sign in with an email/password pair, with Google, or with both once
an existing email account has been linked to its Google identity.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from community.domain.model.common import DomainModel, utc_now
from community.domain.value import UserId, Username


class User(DomainModel):
    """User aggregate root.

    Invariant: an account can always authenticate somehow, so at least one of
    password_hash and google_id is set.
    """

    id: UserId
    username: Username
    email: str = Field(min_length=1, max_length=255)
    password_hash: Optional[str] = None  # None for Google-only accounts
    google_id: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def validate_has_credential(self) -> "User":
        """Validate that the account has a password or a linked identity."""
        if not self.password_hash and not self.google_id:
            raise ValueError("User must have a password hash or a Google identity")
        return self

    @property
    def has_password(self) -> bool:
        """Whether the account can sign in with a password."""
        return self.password_hash is not None
