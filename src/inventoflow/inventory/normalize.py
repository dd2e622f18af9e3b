"""Normalization of the item-list payloads the backend is known to return."""

import logging
from typing import Any

from pydantic import ValidationError

from src.inventoflow.inventory.exceptions import MalformedResponseError
from src.inventoflow.inventory.models import InventoryItem

logger = logging.getLogger(__name__)


def extract_item_list(payload: Any) -> list[Any]:
    """
    Pull the raw item list out of a list response.

    Accepted shapes: {"Items": [...]}, {"items": [...]}, or a bare array.

    Raises:
        MalformedResponseError: For any other shape
    """
    if isinstance(payload, dict):
        for key in ("Items", "items"):
            if isinstance(payload.get(key), list):
                return payload[key]
    if isinstance(payload, list):
        return payload
    raise MalformedResponseError(f"Unexpected item list shape: {type(payload).__name__}")


def normalize_item_list(payload: Any) -> list[InventoryItem]:
    """
    Normalize a list response into InventoryItem models, preserving order.

    Unrecognized shapes yield an empty list and a warning. Entries without an
    itemId (or that are not objects) are skipped with a warning.

    Example:
        >>> normalize_item_list({"Items": [{"itemId": "1", "name": "Pen"}]})[0].itemId
        '1'
    """
    try:
        raw_items = extract_item_list(payload)
    except MalformedResponseError as e:
        logger.warning(
            f"Fetched items data is not in an expected format: {e}",
            extra={"error_type": "malformed_item_list", "payload": payload},
        )
        return []

    items: list[InventoryItem] = []
    for index, raw in enumerate(raw_items):
        try:
            items.append(InventoryItem.model_validate(raw))
        except ValidationError as e:
            logger.warning(
                f"Skipping invalid item at index {index}: {e}",
                extra={"error_type": "invalid_item", "index": index},
            )
    return items
