"""Inventory REST API client and item models."""

from src.inventoflow.inventory.client import InventoryAPIClient
from src.inventoflow.inventory.exceptions import (
    InventoryAPIError,
    MalformedResponseError,
    RequestFailedError,
)
from src.inventoflow.inventory.models import InventoryItem, ItemCreate, ItemUpdate
from src.inventoflow.inventory.normalize import normalize_item_list

__all__ = [
    "InventoryAPIClient",
    "InventoryItem",
    "ItemCreate",
    "ItemUpdate",
    "normalize_item_list",
    "InventoryAPIError",
    "RequestFailedError",
    "MalformedResponseError",
]
