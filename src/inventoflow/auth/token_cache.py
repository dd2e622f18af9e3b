"""Local cache of provider tokens used to restore sessions across restarts."""

import logging
from pathlib import Path

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)


class CachedSession(BaseModel):
    """Tokens cached for the last signed-in identity."""

    username: str
    access_token: str
    refresh_token: str | None = None


class TokenCache:
    """
    Holds the last signed-in identity's tokens.

    Kept in memory, and mirrored to a JSON file when a path is given so a
    restarted process can restore the session.

    Example:
        >>> cache = TokenCache("~/.inventoflow/session.json")
        >>> cache.save(CachedSession(username="a@b.com", access_token="..."))
        >>> cache.load().username
        'a@b.com'
    """

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path).expanduser() if path else None
        self._entry: CachedSession | None = None
        self._loaded = False

    def load(self) -> CachedSession | None:
        """Return the cached session, reading the file on first access."""
        if not self._loaded:
            self._entry = self._read()
            self._loaded = True
        return self._entry

    def save(self, entry: CachedSession) -> None:
        self._entry = entry
        self._loaded = True
        if self.path is None:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(entry.model_dump_json(), encoding="utf-8")
        except OSError as e:
            logger.warning(
                f"Failed to write session cache {self.path}: {e}",
                extra={"error_type": "session_cache_write_failed"},
            )

    def clear(self) -> None:
        self._entry = None
        self._loaded = True
        if self.path is None:
            return
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(
                f"Failed to remove session cache {self.path}: {e}",
                extra={"error_type": "session_cache_clear_failed"},
            )

    def _read(self) -> CachedSession | None:
        if self.path is None or not self.path.exists():
            return None
        try:
            return CachedSession.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            logger.warning(
                f"Ignoring unreadable session cache {self.path}: {e}",
                extra={"error_type": "session_cache_read_failed"},
            )
            return None
