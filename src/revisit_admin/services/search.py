"""Dashboard search over the category collection."""

from collections.abc import Iterable

from revisit_admin.domain.categories import Category


def filter_categories(
    categories: Iterable[Category], query: str | None
) -> list[Category]:
    """Return categories whose name contains the query, ignoring case."""
    needle = (query or "").strip().casefold()
    if not needle:
        return list(categories)
    return [category for category in categories if needle in category.name.casefold()]
