"""Key-value storage interface used for persisted snapshots."""

from typing import Protocol

SESSION_STORAGE_KEY = "revisitUser"
CATEGORIES_STORAGE_KEY = "revisitCategories"


class KeyValueStorage(Protocol):
    """Persistence interface for string values keyed by name."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""

    def set_item(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""

    def remove_item(self, key: str) -> None:
        """Remove a key if present."""
