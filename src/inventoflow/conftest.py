"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator, Mapping
from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from src.inventoflow.auth.exceptions import ProviderAuthError
from src.inventoflow.auth.models import ProviderSession, SignUpResult
from src.inventoflow.auth.provider import IdentityProvider
from src.inventoflow.dependencies import set_services
from src.inventoflow.main import app


class FakeIdentityProvider(IdentityProvider):
    """
    In-memory identity provider for tests.

    Set `errors[<method name>]` to make a call raise; every call is recorded
    in `calls` as (method name, args).
    """

    def __init__(self) -> None:
        self.cached_username: str | None = None
        self.session = ProviderSession(
            id_token="valid-token", expires_at=datetime.now(UTC) + timedelta(hours=1)
        )
        self.attributes: dict[str, str] = {"email": "jane@example.com"}
        self.sign_up_result = SignUpResult(user_id="user-1", confirmation_required=True)
        self.errors: dict[str, Exception] = {}
        self.calls: list[tuple[str, tuple]] = []

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, args))
        if name in self.errors:
            raise self.errors[name]

    def called(self, name: str) -> bool:
        return any(call[0] == name for call in self.calls)

    def current_username(self) -> str | None:
        return self.cached_username

    async def get_session(self, username: str) -> ProviderSession:
        self._record("get_session", username)
        if username != self.cached_username:
            raise ProviderAuthError("No cached session", code="session_not_found")
        return self.session

    async def get_user_attributes(self, username: str) -> dict[str, str]:
        self._record("get_user_attributes", username)
        return dict(self.attributes)

    async def sign_up(
        self, username: str, password: str, attributes: Mapping[str, str]
    ) -> SignUpResult:
        self._record("sign_up", username, password, dict(attributes))
        return self.sign_up_result

    async def confirm_registration(self, username: str, code: str) -> None:
        self._record("confirm_registration", username, code)

    async def authenticate(self, username: str, password: str) -> ProviderSession:
        self._record("authenticate", username, password)
        self.cached_username = username
        return self.session

    async def forgot_password(self, username: str) -> None:
        self._record("forgot_password", username)

    async def confirm_password(self, username: str, code: str, new_password: str) -> None:
        self._record("confirm_password", username, code, new_password)

    def sign_out(self, username: str) -> None:
        self.calls.append(("sign_out", (username,)))
        if self.cached_username == username:
            self.cached_username = None


@pytest.fixture
def fake_provider() -> FakeIdentityProvider:
    """Provide a fresh in-memory identity provider."""
    return FakeIdentityProvider()


@pytest.fixture
def client() -> Iterator[TestClient]:
    """
    Provide FastAPI test client for API testing.

    The lifespan is not run; tests install service doubles with set_services().

    Example:
        >>> def test_health(client):
        >>>     response = client.get("/health")
        >>>     assert response.status_code == 200
    """
    yield TestClient(app)
    set_services(None, None)
