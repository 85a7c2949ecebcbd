"""Category endpoints for signed-in admins."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from revisit_admin.adapters.image_reader import to_data_uri
from revisit_admin.api.models import CategoryFormRequest
from revisit_admin.domain.categories import category_to_snapshot
from revisit_admin.services.category_form import CategoryForm
from revisit_admin.services.search import filter_categories

if TYPE_CHECKING:
    from revisit_admin.containers import AppContainer

_FORM_ERROR_STATUS = 422


async def require_session(request: Request) -> None:
    """Reject requests when nobody is signed in."""
    container: AppContainer = request.app.state.container
    if not container.session_store.is_authenticated:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


router = APIRouter(
    prefix="/categories",
    tags=["categories"],
    dependencies=[Depends(require_session)],
)


def _to_form(body: CategoryFormRequest) -> CategoryForm:
    return CategoryForm(
        name=body.name,
        item_count=body.item_count,
        image_url=body.image_url,
        image_preview=body.image_preview,
    )


@router.get("")
async def list_categories(
    request: Request, search: str | None = None
) -> dict[str, object]:
    """Return categories, optionally filtered by name."""
    container: AppContainer = request.app.state.container
    store = container.category_store
    matches = filter_categories(store.list(), search)
    return {
        "loading": store.loading,
        "total": len(store.list()),
        "categories": [category_to_snapshot(category) for category in matches],
    }


@router.post("/image-preview")
async def image_preview(
    request: Request, content_type: str = Header(default="")
) -> dict[str, str]:
    """Convert an uploaded image body into a data URI."""
    media_type = content_type.split(";")[0].strip()
    try:
        data_uri = to_data_uri(await request.body(), media_type)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, detail=str(exc)
        ) from exc
    return {"dataUri": data_uri}


@router.get("/{category_id}")
async def get_category(category_id: str, request: Request) -> dict[str, object]:
    """Return a single category."""
    container: AppContainer = request.app.state.container
    category = container.category_store.get(category_id)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return category_to_snapshot(category)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_category(
    body: CategoryFormRequest, request: Request
) -> dict[str, object]:
    """Validate the form and add a category."""
    container: AppContainer = request.app.state.container
    result = await container.category_form_service.submit(_to_form(body))
    if result.errors:
        raise HTTPException(
            status_code=_FORM_ERROR_STATUS, detail=result.errors
        )
    if not result.ok or result.category is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)
    return category_to_snapshot(result.category)


@router.put("/{category_id}")
async def update_category(
    category_id: str, body: CategoryFormRequest, request: Request
) -> dict[str, object]:
    """Validate the form and update an existing category."""
    container: AppContainer = request.app.state.container
    if container.category_store.get(category_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    result = await container.category_form_service.submit(
        _to_form(body), category_id=category_id
    )
    if result.errors:
        raise HTTPException(
            status_code=_FORM_ERROR_STATUS, detail=result.errors
        )
    if not result.ok or result.category is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)
    return category_to_snapshot(result.category)


@router.delete("/{category_id}")
async def delete_category(category_id: str, request: Request) -> dict[str, str]:
    """Delete a category; unknown ids are not an error."""
    container: AppContainer = request.app.state.container
    if not await container.category_store.delete(category_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST)
    return {"status": "ok"}
