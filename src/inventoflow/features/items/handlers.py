"""API handlers for inventory item endpoints."""

import logging
from typing import Any

import httpx
from fastapi import APIRouter, Depends, HTTPException, status

from src.inventoflow.dependencies import get_inventory_client
from src.inventoflow.inventory.client import InventoryAPIClient
from src.inventoflow.inventory.exceptions import MalformedResponseError, RequestFailedError
from src.inventoflow.inventory.models import InventoryItem, ItemCreate, ItemUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/items", tags=["items"])


def to_http_exception(error: Exception) -> HTTPException:
    """Map inventory client errors to the HTTP error returned to the browser."""
    if isinstance(error, RequestFailedError):
        return HTTPException(status_code=error.status, detail=error.message)
    if isinstance(error, MalformedResponseError):
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(error))
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY, detail="Inventory API unreachable"
    )


@router.get("", response_model=list[InventoryItem])
async def list_items(
    client: InventoryAPIClient = Depends(get_inventory_client),
) -> list[InventoryItem]:
    """List all inventory items."""
    try:
        return await client.list_items()
    except (RequestFailedError, MalformedResponseError, httpx.HTTPError) as e:
        raise to_http_exception(e)


@router.get("/{item_id}", response_model=InventoryItem)
async def get_item(
    item_id: str,
    client: InventoryAPIClient = Depends(get_inventory_client),
) -> InventoryItem:
    try:
        return await client.get_item(item_id)
    except (RequestFailedError, MalformedResponseError, httpx.HTTPError) as e:
        raise to_http_exception(e)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_item(
    item: ItemCreate,
    client: InventoryAPIClient = Depends(get_inventory_client),
) -> Any:
    """Create an item; returns the inventory API's response unchanged."""
    try:
        return await client.create_item(item)
    except (RequestFailedError, MalformedResponseError, httpx.HTTPError) as e:
        raise to_http_exception(e)


@router.put("")
async def update_item(
    item: ItemUpdate,
    client: InventoryAPIClient = Depends(get_inventory_client),
) -> Any:
    """Partially update an item identified by itemId."""
    try:
        return await client.update_item(item)
    except (RequestFailedError, MalformedResponseError, httpx.HTTPError) as e:
        raise to_http_exception(e)


@router.delete("/{item_id}")
async def delete_item(
    item_id: str,
    client: InventoryAPIClient = Depends(get_inventory_client),
) -> Any:
    try:
        return await client.delete_item(item_id)
    except (RequestFailedError, MalformedResponseError, httpx.HTTPError) as e:
        raise to_http_exception(e)
