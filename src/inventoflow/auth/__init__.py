"""Authentication module: identity provider, session store and session manager."""

from src.inventoflow.auth.exceptions import (
    AuthError,
    MissingAttributeError,
    ProviderAuthError,
    SessionRestoreError,
)
from src.inventoflow.auth.manager import AuthSessionManager
from src.inventoflow.auth.models import (
    AuthSnapshot,
    AuthState,
    ProviderSession,
    SignUpResult,
    UserProfile,
)
from src.inventoflow.auth.profile import derive_profile
from src.inventoflow.auth.provider import IdentityProvider
from src.inventoflow.auth.session_store import SessionStore

__all__ = [
    "AuthSessionManager",
    "SessionStore",
    "IdentityProvider",
    "derive_profile",
    "AuthSnapshot",
    "AuthState",
    "ProviderSession",
    "SignUpResult",
    "UserProfile",
    "AuthError",
    "ProviderAuthError",
    "SessionRestoreError",
    "MissingAttributeError",
]
