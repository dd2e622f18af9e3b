"""Inventory item endpoints."""

from src.inventoflow.features.items.handlers import router

__all__ = ["router"]
