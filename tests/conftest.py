"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from revisit_admin.config import Settings
from revisit_admin.containers import AppContainer
from revisit_admin.services.auth import SessionStore
from revisit_admin.services.categories import CategoryStore
from revisit_admin.services.category_form import CategoryFormService
from revisit_admin.services.notifications import NotificationCenter, Severity
from revisit_admin.services.storage import KeyValueStorage


@dataclass
class InMemoryStorage(KeyValueStorage):
    """In-memory key-value storage for tests."""

    items: dict[str, str] = field(default_factory=dict)
    writes: list[tuple[str, str]] = field(default_factory=list)
    fail_writes: bool = False

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError("disk full")
        self.items[key] = value
        self.writes.append((key, value))

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


@dataclass
class FakeImageProbe:
    """Image probe that accepts a fixed set of URLs."""

    valid_urls: set[str] = field(default_factory=set)
    checked: list[str] = field(default_factory=list)

    async def is_image(self, url: str) -> bool:
        self.checked.append(url)
        return url in self.valid_urls


def messages(center: NotificationCenter) -> list[tuple[str, Severity]]:
    return [(note.message, note.severity) for note in center.pending()]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(storage_path=tmp_path / "storage.json", latency_seconds=0)


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def notifications() -> NotificationCenter:
    return NotificationCenter()


@pytest.fixture
def category_store(
    storage: InMemoryStorage, notifications: NotificationCenter
) -> CategoryStore:
    store = CategoryStore(storage=storage, notifier=notifications)
    store.load()
    return store


@pytest.fixture
def session_store(
    storage: InMemoryStorage, notifications: NotificationCenter
) -> SessionStore:
    return SessionStore(storage=storage, notifier=notifications)


@pytest.fixture
def container(
    settings: Settings,
    storage: InMemoryStorage,
    notifications: NotificationCenter,
    session_store: SessionStore,
    category_store: CategoryStore,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        storage=storage,
        notifications=notifications,
        session_store=session_store,
        category_store=category_store,
        category_form_service=CategoryFormService(category_store),
        close_resources=close_resources,
    )
