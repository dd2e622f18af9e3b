"""HTTP client for the inventory REST API."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from src.inventoflow.auth.session_store import SessionStore
from src.inventoflow.inventory.exceptions import MalformedResponseError, RequestFailedError
from src.inventoflow.inventory.models import InventoryItem, ItemCreate, ItemUpdate
from src.inventoflow.inventory.normalize import normalize_item_list

logger = logging.getLogger(__name__)


class InventoryAPIClient:
    """
    CRUD client for the inventory endpoint.

    Every request first asks the session store for an Authorization header.
    Without a valid session the header is simply omitted and the remote API
    is left to reject the call.

    Attributes:
        base_url: Inventory API base URL (without the /items path)
        session_store: Source of the bearer token
        _http_client: Async HTTP client (injectable for tests)

    Example:
        >>> client = InventoryAPIClient(settings.inventory_api_url, store)
        >>> items = await client.list_items()
        >>> await client.aclose()
    """

    def __init__(
        self,
        base_url: str,
        session_store: SessionStore,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.session_store = session_store
        self._http_client = http_client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    @property
    def items_url(self) -> str:
        return f"{self.base_url}/items"

    async def list_items(self) -> list[InventoryItem]:
        """
        Fetch all inventory items.

        Returns:
            Items in API order; empty if the response shape is unrecognized

        Raises:
            RequestFailedError: On a non-success status
            httpx.HTTPError: On transport failure
        """
        data = await self._request("GET", "fetching items")
        return normalize_item_list(data)

    async def get_item(self, item_id: str) -> InventoryItem:
        """
        Fetch a single item by ID.

        Raises:
            RequestFailedError: On a non-success status
            MalformedResponseError: If the body is not an item
        """
        data = await self._request(
            "GET", f"fetching item {item_id}", params={"itemId": item_id}
        )
        try:
            return InventoryItem.model_validate(data)
        except ValidationError as e:
            raise MalformedResponseError(f"Invalid item payload for {item_id}: {e}") from e

    async def create_item(self, item: ItemCreate) -> Any:
        """Create an item and return the API's JSON response."""
        return await self._request("POST", "creating item", json=item.model_dump(mode="json"))

    async def update_item(self, item: ItemUpdate) -> Any:
        """Send a partial update (only fields that were set) and return the API's JSON."""
        return await self._request(
            "PUT",
            f"updating item {item.itemId}",
            json=item.model_dump(mode="json", exclude_unset=True),
        )

    async def delete_item(self, item_id: str) -> Any:
        """Delete an item and return the API's confirmation JSON."""
        return await self._request(
            "DELETE", f"deleting item {item_id}", params={"itemId": item_id}
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._http_client.aclose()

    async def _request(
        self,
        method: str,
        action: str,
        params: dict[str, str] | None = None,
        json: Any = None,
    ) -> Any:
        # Token lookup always completes before the request is issued
        headers = await self.session_store.get_auth_headers()
        if method != "DELETE":
            headers["Content-Type"] = "application/json"

        try:
            response = await self._http_client.request(
                method, self.items_url, params=params, json=json, headers=headers
            )
            if not response.is_success:
                raise RequestFailedError(response.status_code, self._error_message(response))

        except RequestFailedError as e:
            logger.error(
                f"Error {action}: {e.message}",
                extra={"error_type": "request_failed", "status": e.status},
            )
            raise

        except httpx.HTTPError as e:
            logger.error(
                f"Error {action}: {e}",
                exc_info=True,
                extra={"error_type": "transport_error"},
            )
            raise

        try:
            return response.json()
        except ValueError as e:
            logger.error(
                f"Error {action}: response is not JSON",
                extra={"error_type": "malformed_response", "status": response.status_code},
            )
            raise MalformedResponseError(f"Non-JSON response while {action}") from e

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Best-effort error message: the body's 'message' field, else a generic one."""
        try:
            body = response.json()
        except ValueError:
            body = None

        message = body.get("message") if isinstance(body, dict) else None
        if isinstance(message, str) and message:
            return message
        return f"API error: {response.status_code}"
