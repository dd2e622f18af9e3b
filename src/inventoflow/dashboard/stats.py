"""Stock statistics computed client-side from the item list."""

from collections.abc import Sequence

from pydantic import BaseModel, Field

from src.inventoflow.inventory.models import InventoryItem

UNCATEGORIZED = "Uncategorized"
LOW_STOCK_PREVIEW_SIZE = 5


class CategoryStock(BaseModel):
    """Total units held in one category."""

    name: str
    stock: int | float


class DashboardSummary(BaseModel):
    """Aggregates shown on the dashboard."""

    total_items: int
    total_value: float
    low_stock_count: int
    out_of_stock_count: int
    category_stock: list[CategoryStock] = Field(default_factory=list)
    low_stock_items: list[InventoryItem] = Field(
        default_factory=list,
        max_length=LOW_STOCK_PREVIEW_SIZE,
        description="First low-stock items in list order",
    )


def summarize(items: Sequence[InventoryItem], low_stock_threshold: int = 10) -> DashboardSummary:
    """
    Compute dashboard aggregates.

    Low stock means 0 < quantity < threshold; out of stock means quantity == 0.
    A missing quantity or price counts as 0 in sums and in neither stock level.
    Items without a category count as "Uncategorized". Categories are sorted by
    stock, largest first; ties keep first-seen order.

    Args:
        items: Items as returned by the API client
        low_stock_threshold: Quantity below which a stocked item is "low"

    Returns:
        DashboardSummary
    """
    low_stock = [
        item
        for item in items
        if item.quantity is not None and 0 < item.quantity < low_stock_threshold
    ]

    stock_by_category: dict[str, int | float] = {}
    for item in items:
        category = item.category or UNCATEGORIZED
        stock_by_category[category] = stock_by_category.get(category, 0) + (item.quantity or 0)

    category_stock = sorted(
        (CategoryStock(name=name, stock=stock) for name, stock in stock_by_category.items()),
        key=lambda entry: entry.stock,
        reverse=True,
    )

    return DashboardSummary(
        total_items=len(items),
        total_value=sum((item.price or 0) * (item.quantity or 0) for item in items),
        low_stock_count=len(low_stock),
        out_of_stock_count=sum(1 for item in items if item.quantity == 0),
        category_stock=category_stock,
        low_stock_items=low_stock[:LOW_STOCK_PREVIEW_SIZE],
    )
