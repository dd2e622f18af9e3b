"""Supabase Auth implementation of the identity provider."""

import logging
from collections.abc import Awaitable, Mapping
from datetime import UTC, datetime
from typing import TypeVar

from jose import JWTError, jwt
from supabase import AsyncClient, AsyncClientOptions, acreate_client

from src.inventoflow.auth.exceptions import ProviderAuthError
from src.inventoflow.auth.models import ProviderSession, SignUpResult
from src.inventoflow.auth.provider import IdentityProvider
from src.inventoflow.auth.token_cache import CachedSession, TokenCache
from src.inventoflow.config import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SupabaseIdentityProvider(IdentityProvider):
    """
    Identity provider backed by Supabase Auth.

    The Supabase client is used for network calls only; the signed-in
    identity's tokens live in a TokenCache owned by this provider, so sign-out
    and current-user lookup stay local.

    Attributes:
        client: Supabase async client
        cache: Token cache for the signed-in identity
        leeway: Seconds before expiry at which the access token is refreshed

    Example:
        >>> provider = await create_supabase_provider(settings)
        >>> session = await provider.authenticate("a@b.com", "secret")
        >>> session.is_valid()
        True
    """

    def __init__(self, client: AsyncClient, cache: TokenCache | None = None, leeway: int = 10):
        self.client = client
        self.cache = cache or TokenCache()
        self.leeway = leeway

    def current_username(self) -> str | None:
        entry = self.cache.load()
        return entry.username if entry else None

    async def get_session(self, username: str) -> ProviderSession:
        entry = self._cached_entry(username)
        session = self._to_session(entry.access_token)
        if session.is_valid(self.leeway):
            return session

        if not entry.refresh_token:
            return session

        logger.info("Access token expired, refreshing session", extra={"username": username})
        response = await self._call(
            "refresh_session", self.client.auth.refresh_session(entry.refresh_token)
        )
        if response.session is None:
            raise ProviderAuthError("Session refresh returned no session", code="session_missing")

        self.cache.save(
            CachedSession(
                username=username,
                access_token=response.session.access_token,
                refresh_token=response.session.refresh_token,
            )
        )
        return self._to_session(response.session.access_token)

    async def get_user_attributes(self, username: str) -> dict[str, str]:
        entry = self._cached_entry(username)
        response = await self._call("get_user", self.client.auth.get_user(entry.access_token))
        user = response.user if response else None
        if user is None:
            raise ProviderAuthError(f"No user found for {username}", code="user_not_found")

        metadata = user.user_metadata or {}
        attributes = {
            "email": user.email,
            "name": metadata.get("name") or metadata.get("full_name"),
        }
        return {key: value for key, value in attributes.items() if value}

    async def sign_up(
        self, username: str, password: str, attributes: Mapping[str, str]
    ) -> SignUpResult:
        # Email is the Supabase identifier; anything else goes to user_metadata
        data = {key: value for key, value in attributes.items() if key != "email"}
        response = await self._call(
            "sign_up",
            self.client.auth.sign_up(
                {"email": username, "password": password, "options": {"data": data}}
            ),
        )
        return SignUpResult(
            user_id=str(response.user.id) if response.user else None,
            confirmation_required=response.session is None,
        )

    async def confirm_registration(self, username: str, code: str) -> None:
        await self._call(
            "confirm_registration",
            self.client.auth.verify_otp({"email": username, "token": code, "type": "signup"}),
        )

    async def authenticate(self, username: str, password: str) -> ProviderSession:
        response = await self._call(
            "authenticate",
            self.client.auth.sign_in_with_password({"email": username, "password": password}),
        )
        if response.session is None:
            raise ProviderAuthError("Authentication returned no session", code="session_missing")

        self.cache.save(
            CachedSession(
                username=username,
                access_token=response.session.access_token,
                refresh_token=response.session.refresh_token,
            )
        )
        return self._to_session(response.session.access_token)

    async def forgot_password(self, username: str) -> None:
        await self._call("forgot_password", self.client.auth.reset_password_for_email(username))

    async def confirm_password(self, username: str, code: str, new_password: str) -> None:
        await self._call(
            "verify_recovery_code",
            self.client.auth.verify_otp({"email": username, "token": code, "type": "recovery"}),
        )
        await self._call("update_password", self.client.auth.update_user({"password": new_password}))

    def sign_out(self, username: str) -> None:
        entry = self.cache.load()
        if entry is not None and entry.username == username:
            self.cache.clear()
            logger.info("Cleared cached session", extra={"username": username})

    def _cached_entry(self, username: str) -> CachedSession:
        entry = self.cache.load()
        if entry is None or entry.username != username:
            raise ProviderAuthError(f"No cached session for {username}", code="session_not_found")
        return entry

    @staticmethod
    def _to_session(access_token: str) -> ProviderSession:
        """Build a session from the access token, reading expiry from its 'exp' claim."""
        try:
            exp = jwt.get_unverified_claims(access_token).get("exp")
        except JWTError as e:
            logger.warning(
                f"Unreadable access token: {e}", extra={"error_type": "token_decode_failed"}
            )
            exp = None

        expires_at = datetime.fromtimestamp(exp, UTC) if exp else None
        return ProviderSession(id_token=access_token, expires_at=expires_at)

    @staticmethod
    async def _call(operation: str, awaitable: Awaitable[T]) -> T:
        """Await a Supabase call, converting any failure into ProviderAuthError."""
        try:
            return await awaitable
        except Exception as e:
            logger.warning(
                f"Supabase {operation} failed: {e}",
                extra={"error_type": "provider_error", "operation": operation},
            )
            raise ProviderAuthError(str(e), code=getattr(e, "code", None)) from e


async def create_supabase_provider(settings: Settings) -> SupabaseIdentityProvider:
    """
    Create a Supabase-backed provider from settings.

    Session persistence and background refresh are disabled on the Supabase
    client; the provider's TokenCache handles both.
    """
    client = await acreate_client(
        settings.supabase_url,
        settings.supabase_anon_key,
        options=AsyncClientOptions(auto_refresh_token=False, persist_session=False),
    )
    return SupabaseIdentityProvider(
        client=client,
        cache=TokenCache(settings.session_cache_path),
        leeway=settings.session_expiry_leeway_seconds,
    )
