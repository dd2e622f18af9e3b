"""API handlers for dashboard endpoints."""

import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException, status

from src.inventoflow.config import settings
from src.inventoflow.dashboard.stats import DashboardSummary, summarize
from src.inventoflow.dependencies import get_inventory_client
from src.inventoflow.inventory.client import InventoryAPIClient
from src.inventoflow.inventory.exceptions import InventoryAPIError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/dashboard", response_model=DashboardSummary)
async def get_dashboard(
    client: InventoryAPIClient = Depends(get_inventory_client),
) -> DashboardSummary:
    """
    Get stock statistics for the dashboard.

    Fetches the full item list and aggregates it: total products, total
    inventory value, low-stock and out-of-stock counts, stock per category
    and a preview of low-stock items.

    Raises:
        HTTPException: 502 if the item list cannot be fetched
    """
    try:
        items = await client.list_items()
    except (InventoryAPIError, httpx.HTTPError) as e:
        logger.error(f"Dashboard load failed: {e}", extra={"error_type": "dashboard_fetch_failed"})
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to fetch dashboard data.",
        )

    return summarize(items, low_stock_threshold=settings.low_stock_threshold)
