"""Category store: the ordered category collection and its mutations."""

import asyncio
import dataclasses
import json
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from revisit_admin.domain.categories import (
    CATEGORY_FIELDS,
    DEFAULT_CATEGORIES,
    Category,
    CategoryChanges,
    category_to_snapshot,
    parse_category,
)
from revisit_admin.services.notifications import Notifier, Severity
from revisit_admin.services.storage import CATEGORIES_STORAGE_KEY, KeyValueStorage
from revisit_admin.services.subscriptions import Listener, Subscribers

logger = logging.getLogger(__name__)


class CategoryNotFoundError(LookupError):
    """Raised internally when an update targets an unknown id."""


@dataclass
class CategoryStore:
    """Owns the category collection and mirrors it to storage.

    Mutations wait ``latency_seconds`` and then apply against the latest
    collection. They run one at a time in call order. Every write persists the
    whole collection before the in-memory state is replaced, so a failed write
    leaves both unchanged.
    """

    storage: KeyValueStorage
    notifier: Notifier
    latency_seconds: float = 0.0
    clock: Callable[[], float] = time.time
    loading: bool = field(default=True, init=False)
    _categories: tuple[Category, ...] = field(default=(), init=False)
    _last_issued_id: int = field(default=0, init=False)
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False)
    _subscribers: Subscribers = field(default_factory=Subscribers, init=False)

    def load(self) -> None:
        """Load the persisted collection, seeding defaults when absent or bad."""
        raw = self.storage.get_item(CATEGORIES_STORAGE_KEY)
        categories: tuple[Category, ...] | None = None
        if raw is not None:
            try:
                categories = _parse_snapshot(raw)
            except (ValueError, OverflowError, RecursionError):
                logger.warning(
                    "Discarding malformed category snapshot", exc_info=True
                )
        if categories is None:
            categories = DEFAULT_CATEGORIES
            self._persist(categories)
        self._categories = categories
        self.loading = False
        self._subscribers.publish()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback invoked after every committed change."""
        return self._subscribers.subscribe(listener)

    def list(self) -> tuple[Category, ...]:
        """Return the current collection in insertion order."""
        return self._categories

    def get(self, category_id: str) -> Category | None:
        """Return a category by id, if present."""
        for category in self._categories:
            if category.id == category_id:
                return category
        return None

    async def create(
        self, name: str, item_count: int, image_url: str
    ) -> Category | None:
        """Append a new category and return it, or None on failure."""
        async with self._lock:
            try:
                await self._simulate_latency()
                created = Category(
                    id=self._next_id(),
                    name=name,
                    item_count=item_count,
                    image_url=image_url,
                )
                self._commit((*self._categories, created))
            except Exception:
                logger.exception("Failed to add category %r", name)
                self.notifier.notify(
                    "Failed to add category. Please try again.", Severity.ERROR
                )
                return None
        self.notifier.notify("Category added successfully!", Severity.SUCCESS)
        return created

    async def update(self, category_id: str, changes: CategoryChanges) -> bool:
        """Merge the supplied fields into an existing category.

        Keys outside ``CategoryChanges`` raise ValueError before any latency.
        """
        unknown = set(changes) - CATEGORY_FIELDS
        if unknown:
            raise ValueError(f"Unknown category fields: {sorted(unknown)}")
        async with self._lock:
            try:
                await self._simulate_latency()
                if self.get(category_id) is None:
                    raise CategoryNotFoundError(category_id)
                self._commit(
                    tuple(
                        dataclasses.replace(category, **changes)
                        if category.id == category_id
                        else category
                        for category in self._categories
                    )
                )
            except CategoryNotFoundError:
                logger.warning("Update for unknown category %s", category_id)
                self.notifier.notify("Category not found.", Severity.ERROR)
                return False
            except Exception:
                logger.exception("Failed to update category %s", category_id)
                self.notifier.notify(
                    "Failed to update category. Please try again.", Severity.ERROR
                )
                return False
        self.notifier.notify("Category updated successfully!", Severity.SUCCESS)
        return True

    async def delete(self, category_id: str) -> bool:
        """Remove a category; deleting an unknown id still succeeds."""
        async with self._lock:
            try:
                await self._simulate_latency()
                self._commit(
                    tuple(
                        category
                        for category in self._categories
                        if category.id != category_id
                    )
                )
            except Exception:
                logger.exception("Failed to delete category %s", category_id)
                self.notifier.notify(
                    "Failed to delete category. Please try again.", Severity.ERROR
                )
                return False
        self.notifier.notify("Category deleted successfully!", Severity.SUCCESS)
        return True

    def _commit(self, categories: tuple[Category, ...]) -> None:
        self._persist(categories)
        self._categories = categories
        self._subscribers.publish()

    def _persist(self, categories: tuple[Category, ...]) -> None:
        self.storage.set_item(
            CATEGORIES_STORAGE_KEY,
            json.dumps([category_to_snapshot(category) for category in categories]),
        )

    def _next_id(self) -> str:
        """Issue a millisecond timestamp id that is unique and increasing."""
        existing = {category.id for category in self._categories}
        candidate = max(int(self.clock() * 1000), self._last_issued_id + 1)
        while str(candidate) in existing:
            candidate += 1
        self._last_issued_id = candidate
        return str(candidate)

    async def _simulate_latency(self) -> None:
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)


def _parse_snapshot(raw: str) -> tuple[Category, ...]:
    data = json.loads(raw)
    if not isinstance(data, list):
        raise ValueError("Category snapshot must be a list")
    categories = tuple(parse_category(row) for row in data)
    ids = [category.id for category in categories]
    if len(ids) != len(set(ids)):
        raise ValueError("Category snapshot contains duplicate ids")
    return categories
