"""Create/edit form handling for categories."""

from dataclasses import dataclass, field

from revisit_admin.adapters.image_probe import ImageProbe
from revisit_admin.domain.categories import Category
from revisit_admin.services.categories import CategoryStore

INVALID_IMAGE_MESSAGE = "Invalid image URL. Please provide a valid URL."


@dataclass(frozen=True)
class CategoryForm:
    """Raw form inputs as typed by the user."""

    name: str = ""
    item_count: str = ""
    image_url: str = ""
    image_preview: str = ""

    @property
    def image_source(self) -> str:
        """Typed URL wins over an uploaded preview."""
        return self.image_url.strip() or self.image_preview

    @classmethod
    def from_category(cls, category: Category) -> "CategoryForm":
        return cls(
            name=category.name,
            item_count=str(category.item_count),
            image_url=category.image_url,
            image_preview=category.image_url,
        )


@dataclass(frozen=True)
class FormResult:
    """Outcome of a form submission."""

    ok: bool
    errors: dict[str, str] = field(default_factory=dict)
    category: Category | None = None


def _parse_item_count(raw: str) -> int | None:
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    if value < 0 or not value.is_integer():
        return None
    return int(value)


def validate(form: CategoryForm) -> dict[str, str]:
    """Return field-level error messages; an empty dict means valid."""
    errors: dict[str, str] = {}
    if not form.name.strip():
        errors["name"] = "Category name is required"
    if not form.item_count.strip():
        errors["item_count"] = "Item count is required"
    elif _parse_item_count(form.item_count) is None:
        errors["item_count"] = "Item count must be a positive number"
    if not form.image_source:
        errors["image_url"] = "Image URL is required"
    return errors


@dataclass
class CategoryFormService:
    """Validates form input and forwards it to the category store."""

    store: CategoryStore
    image_probe: ImageProbe | None = None

    def load(self, category_id: str) -> CategoryForm | None:
        """Return a pre-filled form for editing, or None if the id is unknown."""
        category = self.store.get(category_id)
        if category is None:
            return None
        return CategoryForm.from_category(category)

    async def submit(
        self, form: CategoryForm, category_id: str | None = None
    ) -> FormResult:
        """Validate and then create, or update when an id is given."""
        errors = validate(form)
        if errors:
            return FormResult(ok=False, errors=errors)
        image_url = form.image_source
        if self.image_probe is not None and not await self.image_probe.is_image(
            image_url
        ):
            return FormResult(ok=False, errors={"image_url": INVALID_IMAGE_MESSAGE})

        name = form.name.strip()
        item_count = _parse_item_count(form.item_count)
        if category_id is None:
            created = await self.store.create(
                name=name, item_count=item_count, image_url=image_url
            )
            return FormResult(ok=created is not None, category=created)

        updated = await self.store.update(
            category_id,
            {"name": name, "item_count": item_count, "image_url": image_url},
        )
        return FormResult(ok=updated, category=self.store.get(category_id))
