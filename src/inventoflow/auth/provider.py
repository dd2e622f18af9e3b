"""Abstract base class for identity providers."""

from abc import ABC, abstractmethod
from collections.abc import Mapping

from src.inventoflow.auth.models import ProviderSession, SignUpResult


class IdentityProvider(ABC):
    """
    Abstract base for identity providers.

    Network operations are coroutines that either return a result or raise
    ProviderAuthError. Lookup of the locally cached identity and sign-out are
    synchronous and never touch the network.
    """

    @abstractmethod
    def current_username(self) -> str | None:
        """Return the username of the locally cached identity, if any."""
        pass

    @abstractmethod
    async def get_session(self, username: str) -> ProviderSession:
        """
        Get the current session for a cached identity, refreshing it if needed.

        Raises:
            ProviderAuthError: If no session exists or the provider rejects it
        """
        pass

    @abstractmethod
    async def get_user_attributes(self, username: str) -> dict[str, str]:
        """
        Fetch attributes (email, name, ...) for an authenticated identity.

        Raises:
            ProviderAuthError: If the attributes cannot be fetched
        """
        pass

    @abstractmethod
    async def sign_up(
        self, username: str, password: str, attributes: Mapping[str, str]
    ) -> SignUpResult:
        """Register a new identity."""
        pass

    @abstractmethod
    async def confirm_registration(self, username: str, code: str) -> None:
        """Confirm a registration with the code sent to the user."""
        pass

    @abstractmethod
    async def authenticate(self, username: str, password: str) -> ProviderSession:
        """Authenticate with username/password and cache the resulting session."""
        pass

    @abstractmethod
    async def forgot_password(self, username: str) -> None:
        """Start the password reset flow (sends a code to the user)."""
        pass

    @abstractmethod
    async def confirm_password(self, username: str, code: str, new_password: str) -> None:
        """Complete the password reset flow."""
        pass

    @abstractmethod
    def sign_out(self, username: str) -> None:
        """Forget the locally cached session for username. Must not raise."""
        pass
