"""Dashboard endpoints."""

from src.inventoflow.features.dashboard.handlers import router

__all__ = ["router"]
