"""Custom exceptions for the inventory API client."""


class InventoryAPIError(Exception):
    """Base exception for all inventory API errors."""

    pass


class RequestFailedError(InventoryAPIError):
    """
    Raised when the inventory API answers with a non-success status.

    Attributes:
        status: HTTP status code
        message: Message from the error body, or "API error: <status>"
    """

    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status
        self.message = message


class MalformedResponseError(InventoryAPIError):
    """Raised (or logged) when a response body does not have the expected shape."""

    pass
