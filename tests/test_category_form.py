"""Tests for category form validation and submission."""

import asyncio

import pytest

from revisit_admin.services.categories import CategoryStore
from revisit_admin.services.category_form import (
    INVALID_IMAGE_MESSAGE,
    CategoryForm,
    CategoryFormService,
    validate,
)
from tests.conftest import FakeImageProbe, InMemoryStorage


def test_valid_form_has_no_errors() -> None:
    form = CategoryForm(name="Hats", item_count="3", image_url="https://x/h.jpg")

    assert validate(form) == {}


def test_empty_form_reports_every_field() -> None:
    assert validate(CategoryForm()) == {
        "name": "Category name is required",
        "item_count": "Item count is required",
        "image_url": "Image URL is required",
    }


@pytest.mark.parametrize("raw", ["-1", "abc", "2.5"])
def test_invalid_item_count(raw: str) -> None:
    form = CategoryForm(name="Hats", item_count=raw, image_url="https://x")

    assert validate(form) == {"item_count": "Item count must be a positive number"}


def test_uploaded_preview_satisfies_image_requirement() -> None:
    form = CategoryForm(
        name="Hats", item_count="0", image_preview="data:image/png;base64,AA=="
    )

    assert validate(form) == {}
    assert form.image_source == "data:image/png;base64,AA=="


def test_invalid_form_never_reaches_store(
    category_store: CategoryStore, storage: InMemoryStorage
) -> None:
    service = CategoryFormService(category_store)
    writes_before = len(storage.writes)

    result = asyncio.run(service.submit(CategoryForm(name="  ", item_count="1")))

    assert not result.ok
    assert set(result.errors) == {"name", "image_url"}
    assert len(storage.writes) == writes_before


def test_submit_creates_category(category_store: CategoryStore) -> None:
    service = CategoryFormService(category_store)

    result = asyncio.run(
        service.submit(
            CategoryForm(name=" Hats ", item_count="7", image_url="https://x/h.jpg")
        )
    )

    assert result.ok
    assert result.category is not None
    assert result.category.name == "Hats"
    assert result.category.item_count == 7
    assert category_store.list()[-1] == result.category


def test_submit_with_id_updates_category(category_store: CategoryStore) -> None:
    service = CategoryFormService(category_store)
    form = service.load("3")
    assert form is not None
    assert form.name == "Formal Wear"

    result = asyncio.run(
        service.submit(
            CategoryForm(
                name=form.name,
                item_count="99",
                image_url=form.image_url,
                image_preview=form.image_preview,
            ),
            category_id="3",
        )
    )

    assert result.ok
    updated = category_store.get("3")
    assert updated is not None
    assert updated.item_count == 99
    assert updated.name == "Formal Wear"


def test_load_unknown_category_returns_none(category_store: CategoryStore) -> None:
    assert CategoryFormService(category_store).load("missing") is None


def test_image_probe_rejects_broken_url(category_store: CategoryStore) -> None:
    probe = FakeImageProbe(valid_urls={"https://ok/img.png"})
    service = CategoryFormService(category_store, image_probe=probe)
    count_before = len(category_store.list())

    result = asyncio.run(
        service.submit(
            CategoryForm(name="Hats", item_count="1", image_url="https://bad/x")
        )
    )

    assert not result.ok
    assert result.errors == {"image_url": INVALID_IMAGE_MESSAGE}
    assert len(category_store.list()) == count_before
    assert probe.checked == ["https://bad/x"]
