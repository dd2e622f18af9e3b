"""Dashboard aggregates over fetched inventory items."""

from src.inventoflow.dashboard.stats import CategoryStock, DashboardSummary, summarize

__all__ = ["CategoryStock", "DashboardSummary", "summarize"]
