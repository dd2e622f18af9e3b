"""Session (authentication) endpoints."""

from src.inventoflow.features.session.handlers import router

__all__ = ["router"]
