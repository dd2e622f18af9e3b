"""Data models for authentication."""

from datetime import UTC, datetime, timedelta
from enum import Enum

from pydantic import BaseModel


class AuthState(str, Enum):
    """Authentication lifecycle states."""

    LOADING = "loading"
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


class UserProfile(BaseModel):
    """
    User profile derived from identity provider attributes.

    Held in memory for the lifetime of the authenticated session only.

    Attributes:
        name: Display name (falls back to the email local-part)
        email: User email address
        avatar: Placeholder avatar image URI
    """

    name: str
    email: str
    avatar: str


class AuthSnapshot(BaseModel):
    """Public view of the authentication state. Never carries tokens."""

    is_authenticated: bool
    is_loading: bool
    user: UserProfile | None = None


class ProviderSession(BaseModel):
    """
    Provider-issued session.

    Attributes:
        id_token: Bearer token attached to outgoing API requests
        expires_at: Token expiry (None when it could not be determined)
    """

    id_token: str
    expires_at: datetime | None = None

    def is_valid(self, leeway_seconds: int = 0) -> bool:
        """Return True if the token is present and not expired (minus leeway)."""
        if not self.id_token or self.expires_at is None:
            return False
        return datetime.now(UTC) + timedelta(seconds=leeway_seconds) < self.expires_at


class SignUpResult(BaseModel):
    """Result of registering a new identity."""

    user_id: str | None = None
    confirmation_required: bool = True
