"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from revisit_admin.adapters.image_probe import HttpxImageProbe
from revisit_admin.adapters.json_file_storage import JsonFileStorage
from revisit_admin.config import Settings
from revisit_admin.services.auth import SessionStore
from revisit_admin.services.categories import CategoryStore
from revisit_admin.services.category_form import CategoryFormService
from revisit_admin.services.notifications import NotificationCenter
from revisit_admin.services.storage import KeyValueStorage


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    storage: KeyValueStorage
    notifications: NotificationCenter
    session_store: SessionStore
    category_store: CategoryStore
    category_form_service: CategoryFormService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    storage = JsonFileStorage(resolved_settings.storage_path)
    notifications = NotificationCenter(limit=resolved_settings.notification_limit)
    session_store = SessionStore(
        storage=storage,
        notifier=notifications,
        latency_seconds=resolved_settings.latency_seconds,
    )
    category_store = CategoryStore(
        storage=storage,
        notifier=notifications,
        latency_seconds=resolved_settings.latency_seconds,
    )
    category_store.load()
    image_probe = (
        HttpxImageProbe.create() if resolved_settings.verify_image_urls else None
    )
    category_form_service = CategoryFormService(
        store=category_store, image_probe=image_probe
    )

    async def close_resources() -> None:
        if image_probe is not None:
            await image_probe.close()

    return AppContainer(
        settings=resolved_settings,
        storage=storage,
        notifications=notifications,
        session_store=session_store,
        category_store=category_store,
        category_form_service=category_form_service,
        close_resources=close_resources,
    )
