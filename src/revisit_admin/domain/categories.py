"""Domain models for product categories."""

import math
from dataclasses import dataclass
from typing import TypedDict


@dataclass(frozen=True)
class Category:
    """Represents a product category shown on the dashboard."""

    id: str
    name: str
    item_count: int
    image_url: str


class CategoryChanges(TypedDict, total=False):
    """Fields an update may replace; the id never changes."""

    name: str
    item_count: int
    image_url: str


CATEGORY_FIELDS = frozenset(CategoryChanges.__annotations__)


def category_to_snapshot(category: Category) -> dict[str, object]:
    """Serialize a category using the persisted key names."""
    return {
        "id": category.id,
        "name": category.name,
        "itemCount": category.item_count,
        "imageUrl": category.image_url,
    }


def _parse_item_count(category_id: str, raw: object) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int | float):
        raise ValueError(f"Category {category_id} has no item count")
    if isinstance(raw, float) and not (math.isfinite(raw) and raw.is_integer()):
        raise ValueError(f"Category {category_id} item count is not a whole number")
    if raw < 0:
        raise ValueError(f"Category {category_id} item count is negative")
    return int(raw)


def parse_category(row: object) -> Category:
    """Parse a persisted category row into a domain model.

    Raises ValueError for any row that breaks the model: an empty id, name or
    image url, or an item count that is not a non-negative whole number.
    """
    if not isinstance(row, dict):
        raise ValueError(f"Category row must be an object, got {type(row).__name__}")
    category_id = row.get("id")
    name = row.get("name")
    image_url = row.get("imageUrl")
    if not isinstance(category_id, str) or not category_id:
        raise ValueError("Category id must be a non-empty string")
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"Category {category_id} has no name")
    if not isinstance(image_url, str) or not image_url.strip():
        raise ValueError(f"Category {category_id} has no image url")
    return Category(
        id=category_id,
        name=name,
        item_count=_parse_item_count(category_id, row.get("itemCount")),
        image_url=image_url,
    )


_UNSPLASH_SUFFIX = (
    "?ixlib=rb-4.0.3&ixid=M3wxMjA3fDB8MHxwaG90by1wYWdlfHx8fGVufDB8fHx8fA%3D%3D"
    "&auto=format&fit=crop&w=720&q=80"
)

DEFAULT_CATEGORIES: tuple[Category, ...] = (
    Category(
        id="1",
        name="Summer Clothes",
        item_count=26,
        image_url="https://images.unsplash.com/photo-1515886657613-9f3515b0c78f"
        + _UNSPLASH_SUFFIX,
    ),
    Category(
        id="2",
        name="Winter Collection",
        item_count=42,
        image_url="https://images.unsplash.com/photo-1490481651871-ab68de25d43d"
        + _UNSPLASH_SUFFIX,
    ),
    Category(
        id="3",
        name="Formal Wear",
        item_count=15,
        image_url="https://images.unsplash.com/photo-1525507119028-ed4c629a60a3"
        + _UNSPLASH_SUFFIX,
    ),
    Category(
        id="4",
        name="Casual Outfits",
        item_count=38,
        image_url="https://images.unsplash.com/photo-1542060748-10c28b62716f"
        + _UNSPLASH_SUFFIX,
    ),
    Category(
        id="5",
        name="Activewear",
        item_count=20,
        image_url="https://images.unsplash.com/photo-1539008835657-9e8e9680c956"
        + _UNSPLASH_SUFFIX,
    ),
    Category(
        id="6",
        name="Accessories",
        item_count=53,
        image_url="https://images.unsplash.com/photo-1523170335258-f5ed11844a49"
        + _UNSPLASH_SUFFIX,
    ),
)
