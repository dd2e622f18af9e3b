"""Inventory item models mirroring the REST API's JSON."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ItemCreate(BaseModel):
    """Body for creating an item (server assigns itemId and timestamps)."""

    model_config = ConfigDict(extra="allow")

    name: str
    category: str | None = None
    price: float = Field(ge=0)
    quantity: int = Field(ge=0)


class ItemUpdate(BaseModel):
    """Partial update; only fields that were set are sent."""

    model_config = ConfigDict(extra="allow")

    itemId: str = Field(min_length=1)
    name: str | None = None
    category: str | None = None
    price: float | None = Field(default=None, ge=0)
    quantity: int | None = Field(default=None, ge=0)


class InventoryItem(BaseModel):
    """
    Inventory item as returned by the API.

    Only itemId is required. Prices and quantities the backend sends as null
    or as something unreadable are kept as None so the item stays in the list.
    Owned by the remote API; local copies are transient.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    itemId: str
    name: str | None = None
    category: str | None = None
    price: float | None = None
    quantity: int | float | None = None
    createdAt: str | None = None
    updatedAt: str | None = None

    @field_validator("price", "quantity", mode="before")
    @classmethod
    def unreadable_number_to_none(cls, value: Any) -> int | float | None:
        if isinstance(value, bool):
            return None
        if isinstance(value, int | float):
            return value
        if isinstance(value, str):
            for parse in (int, float):
                try:
                    return parse(value)
                except ValueError:
                    continue
        return None
