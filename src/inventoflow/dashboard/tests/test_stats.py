"""Tests for dashboard aggregation."""

import httpx
import pytest

from src.inventoflow.auth.session_store import SessionStore
from src.inventoflow.dashboard.stats import summarize
from src.inventoflow.inventory.client import InventoryAPIClient
from src.inventoflow.inventory.models import InventoryItem
from src.inventoflow.inventory.normalize import normalize_item_list


def item(item_id: str, quantity: int, price: float = 1.0, category: str | None = None):
    return InventoryItem(
        itemId=item_id, name=f"Item {item_id}", price=price, quantity=quantity, category=category
    )


def test_empty_inventory():
    summary = summarize([])

    assert summary.total_items == 0
    assert summary.total_value == 0
    assert summary.low_stock_count == 0
    assert summary.out_of_stock_count == 0
    assert summary.category_stock == []
    assert summary.low_stock_items == []


def test_totals_and_stock_levels():
    items = [
        item("1", 0, price=5.0, category="Office"),
        item("2", 3, price=2.5, category="Office"),
        item("3", 9, price=1.0),
        item("4", 10, price=10.0, category="Kitchen"),
        item("5", 50, price=0.5, category="Kitchen"),
    ]

    summary = summarize(items)

    assert summary.total_items == 5
    assert summary.total_value == pytest.approx(3 * 2.5 + 9 * 1.0 + 10 * 10.0 + 50 * 0.5)
    # Low stock is 0 < quantity < 10: the zero and the ten are excluded
    assert summary.low_stock_count == 2
    assert [entry.itemId for entry in summary.low_stock_items] == ["2", "3"]
    assert summary.out_of_stock_count == 1


def test_category_stock_sorted_descending():
    items = [
        item("1", 2, category="Office"),
        item("2", 7),
        item("3", 30, category="Kitchen"),
        item("4", 5, category="Office"),
        item("5", 0, category=""),
    ]

    summary = summarize(items)

    assert [(entry.name, entry.stock) for entry in summary.category_stock] == [
        ("Kitchen", 30),
        ("Office", 7),
        ("Uncategorized", 7),
    ]


def test_low_stock_preview_is_capped():
    items = [item(str(index), 1) for index in range(8)]

    summary = summarize(items)

    assert summary.low_stock_count == 8
    assert [entry.itemId for entry in summary.low_stock_items] == ["0", "1", "2", "3", "4"]


def test_custom_threshold():
    summary = summarize([item("1", 15), item("2", 25)], low_stock_threshold=20)

    assert summary.low_stock_count == 1


@pytest.mark.asyncio
async def test_out_of_stock_count_from_api_response(fake_provider):
    """Items fetched through the client feed the out-of-stock count."""
    transport = httpx.MockTransport(
        lambda request: httpx.Response(
            200, json={"Items": [{"itemId": "1", "name": "Pen", "price": 2, "quantity": 0}]}
        )
    )
    client = InventoryAPIClient(
        "https://inventory.example.com",
        SessionStore(fake_provider),
        http_client=httpx.AsyncClient(transport=transport),
    )

    summary = summarize(await client.list_items())

    assert summary.out_of_stock_count == 1
    assert summary.total_items == 1


def test_items_with_missing_numbers_still_count():
    """A null price or quantity neither drops the item nor breaks the sums."""
    items = normalize_item_list(
        {
            "Items": [
                {"itemId": "1", "quantity": 0, "price": None},
                {"itemId": "2", "quantity": 3},
                {"itemId": "3", "price": 4.0, "category": "Office"},
            ]
        }
    )

    summary = summarize(items)

    assert summary.total_items == 3
    assert summary.out_of_stock_count == 1
    assert summary.low_stock_count == 1
    assert summary.total_value == 0
    assert [(entry.name, entry.stock) for entry in summary.category_stock] == [
        ("Uncategorized", 3),
        ("Office", 0),
    ]
