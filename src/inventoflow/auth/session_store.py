"""Current-identity store and bearer token lookup for outgoing requests."""

import logging

from src.inventoflow.auth.exceptions import ProviderAuthError
from src.inventoflow.auth.models import ProviderSession
from src.inventoflow.auth.provider import IdentityProvider

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Holds the current authenticated identity.

    Written only by AuthSessionManager; read by the API client. Tokens never
    leave this class except as an Authorization header.

    Example:
        >>> store = SessionStore(provider)
        >>> headers = await store.get_auth_headers()
        >>> headers
        {'Authorization': 'Bearer eyJ...'}
    """

    def __init__(self, provider: IdentityProvider):
        self._provider = provider
        self._username: str | None = None

    @property
    def username(self) -> str | None:
        """Username committed by the session manager, if any."""
        return self._username

    def commit(self, username: str) -> None:
        self._username = username

    def clear(self) -> None:
        self._username = None

    async def get_session(self) -> ProviderSession | None:
        """
        Get the current valid session.

        Falls back to the provider's cached identity so requests issued while
        the session is still being restored carry a token.

        Returns:
            The session if one exists and is valid, otherwise None
        """
        username = self._username or self._provider.current_username()
        if username is None:
            return None

        try:
            session = await self._provider.get_session(username)
        except ProviderAuthError as e:
            logger.debug(f"No usable session for outgoing request: {e}")
            return None

        return session if session.is_valid() else None

    async def get_auth_headers(self) -> dict[str, str]:
        """Return the Authorization header for the current session, or {} if none."""
        session = await self.get_session()
        if session is None:
            return {}
        return {"Authorization": f"Bearer {session.id_token}"}
