"""Custom exceptions for authentication and session handling."""


class AuthError(Exception):
    """Base exception for all authentication-related errors."""

    pass


class ProviderAuthError(AuthError):
    """
    Raised when the identity provider rejects an operation.

    Covers bad credentials, unconfirmed accounts, password policy violations,
    invalid confirmation codes and provider/network failures. Surfaced to the
    caller as-is, never retried.

    Attributes:
        code: Provider error code when one is available (e.g. "invalid_credentials")
    """

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.code = code


class SessionRestoreError(AuthError):
    """Raised internally when a cached session cannot be restored (treated as signed out)."""

    pass


class MissingAttributeError(AuthError):
    """Raised when the provider returns user attributes without a required field."""

    def __init__(self, attribute: str):
        super().__init__(f"User attributes missing required '{attribute}' attribute")
        self.attribute = attribute
