"""FastAPI dependencies exposing the process-wide session manager and API client."""

from src.inventoflow.auth.manager import AuthSessionManager
from src.inventoflow.inventory.client import InventoryAPIClient

# Initialized in main.py startup
_session_manager: AuthSessionManager | None = None
_inventory_client: InventoryAPIClient | None = None


def set_services(
    session_manager: AuthSessionManager | None, inventory_client: InventoryAPIClient | None
) -> None:
    """
    Set the global service instances.

    Called during application startup; tests call it with doubles and reset
    it with (None, None).
    """
    global _session_manager, _inventory_client
    _session_manager = session_manager
    _inventory_client = inventory_client


def get_session_manager() -> AuthSessionManager:
    """
    Get the global session manager.

    Raises:
        RuntimeError: If not initialized
    """
    if _session_manager is None:
        raise RuntimeError(
            "Session manager not initialized. "
            "Ensure application startup event calls set_services()."
        )
    return _session_manager


def get_inventory_client() -> InventoryAPIClient:
    """
    Get the global inventory API client.

    Raises:
        RuntimeError: If not initialized
    """
    if _inventory_client is None:
        raise RuntimeError(
            "Inventory client not initialized. "
            "Ensure application startup event calls set_services()."
        )
    return _inventory_client
