"""Authentication session lifecycle: sign-up, sign-in, password reset, sign-out."""

import logging
from collections.abc import Callable

from src.inventoflow.auth.exceptions import (
    AuthError,
    ProviderAuthError,
    SessionRestoreError,
)
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

logger = logging.getLogger(__name__)

AuthListener = Callable[[AuthSnapshot], None]


class AuthSessionManager:
    """
    Orchestrates authentication flows against an identity provider.

    Starts in the LOADING state until restore_session() completes, then moves
    between UNAUTHENTICATED and AUTHENTICATED. Every committed transition is
    published to subscribers as an AuthSnapshot.

    Provider errors propagate to the caller unchanged (no retries), except
    during restore_session() where they mean "not logged in".

    Example:
        >>> manager = AuthSessionManager(provider, SessionStore(provider))
        >>> await manager.restore_session()
        >>> await manager.login("jane@example.com", "secret")
        >>> manager.user.name
        'jane'
    """

    def __init__(self, provider: IdentityProvider, store: SessionStore):
        self._provider = provider
        self._store = store
        self._state = AuthState.LOADING
        self._loading = True
        self._user: UserProfile | None = None
        self._listeners: list[AuthListener] = []
        # Bumped by login/logout so a slow restore cannot overwrite them
        self._generation = 0

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def is_authenticated(self) -> bool:
        return self._state is AuthState.AUTHENTICATED

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def user(self) -> UserProfile | None:
        return self._user

    @property
    def snapshot(self) -> AuthSnapshot:
        return AuthSnapshot(
            is_authenticated=self.is_authenticated,
            is_loading=self._loading,
            user=self._user,
        )

    def subscribe(self, listener: AuthListener) -> Callable[[], None]:
        """
        Register a listener for state changes.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def restore_session(self) -> AuthSnapshot:
        """
        Restore a previously established session on startup.

        Never raises: any provider failure leaves the user signed out. The
        loading state ends exactly once, whichever branch is taken.

        Returns:
            Snapshot after restoration
        """
        generation = self._generation
        username: str | None = None
        profile: UserProfile | None = None

        try:
            username = self._provider.current_username()
            if username is None:
                logger.info("No cached identity, starting unauthenticated")
            else:
                profile = await self._restore(username)
        except Exception as e:
            error = SessionRestoreError(f"Could not restore session for {username}: {e}")
            logger.warning(
                str(error),
                exc_info=not isinstance(e, AuthError),
                extra={"error_type": "session_restore_failed"},
            )
            profile = None
        finally:
            was_loading = self._loading
            self._loading = False
            if generation == self._generation:
                if profile is not None and username is not None:
                    self._store.commit(username)
                    self._state = AuthState.AUTHENTICATED
                    self._user = profile
                else:
                    self._store.clear()
                    self._state = AuthState.UNAUTHENTICATED
                    self._user = None
            if was_loading or generation == self._generation:
                self._publish()

        return self.snapshot

    async def _restore(self, username: str) -> UserProfile | None:
        session = await self._provider.get_session(username)
        if not session.is_valid():
            logger.info("Cached session is no longer valid", extra={"username": username})
            return None

        profile = await self._load_profile(username)
        logger.info(f"Session restored for {username}")
        return profile

    async def login(self, identifier: str, secret: str) -> ProviderSession:
        """
        Authenticate and establish a session.

        Args:
            identifier: Username (email address)
            secret: Password

        Returns:
            The provider session

        Raises:
            ProviderAuthError: Bad credentials, unconfirmed account, network error
            MissingAttributeError: Provider returned attributes without an email
        """
        try:
            session = await self._provider.authenticate(identifier, secret)
        except ProviderAuthError as e:
            logger.warning(
                f"Login failed for {identifier}: {e}",
                extra={"error_type": "login_failed", "code": e.code},
            )
            raise

        try:
            profile = await self._load_profile(identifier)
        except AuthError:
            # authenticate() already replaced any previous identity's tokens
            self._provider.sign_out(identifier)
            self._store.clear()
            if self._state is not AuthState.UNAUTHENTICATED or self._user is not None:
                self._generation += 1
                self._state = AuthState.UNAUTHENTICATED
                self._user = None
                self._publish()
            raise

        self._generation += 1
        self._store.commit(identifier)
        self._state = AuthState.AUTHENTICATED
        self._user = profile
        logger.info(f"User logged in: {identifier}")
        self._publish()
        return session

    async def signup(self, identifier: str, secret: str) -> SignUpResult:
        """
        Register a new identity with email = identifier.

        Raises:
            ProviderAuthError: Identifier already registered, password policy violation
        """
        result = await self._provider.sign_up(identifier, secret, {"email": identifier})
        logger.info(
            f"Sign-up submitted for {identifier}",
            extra={"confirmation_required": result.confirmation_required},
        )
        return result

    async def confirm_sign_up(self, identifier: str, code: str) -> None:
        """Submit a registration confirmation code. Raises ProviderAuthError if rejected."""
        await self._provider.confirm_registration(identifier, code)
        logger.info(f"Sign-up confirmed for {identifier}")

    async def forgot_password(self, identifier: str) -> None:
        """Start a password reset. Raises ProviderAuthError if rejected."""
        await self._provider.forgot_password(identifier)

    async def confirm_password(self, identifier: str, code: str, new_secret: str) -> None:
        """Complete a password reset. Raises ProviderAuthError if rejected."""
        await self._provider.confirm_password(identifier, code, new_secret)
        logger.info(f"Password reset completed for {identifier}")

    def logout(self) -> None:
        """
        Sign out locally.

        Always succeeds and is idempotent: calling it while signed out leaves
        the state untouched and publishes nothing.
        """
        username = self._store.username or self._provider.current_username()
        if username is not None:
            self._provider.sign_out(username)
        self._store.clear()

        if self._state is AuthState.UNAUTHENTICATED and self._user is None:
            return

        self._generation += 1
        self._state = AuthState.UNAUTHENTICATED
        self._user = None
        logger.info(f"User logged out: {username}")
        self._publish()

    async def _load_profile(self, username: str) -> UserProfile:
        attributes = await self._provider.get_user_attributes(username)
        return derive_profile(attributes)

    def _publish(self) -> None:
        snapshot = self.snapshot
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as e:
                logger.error(f"Auth listener failed: {e}", exc_info=True)
