"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from revisit_admin.api.auth import router as auth_router
from revisit_admin.api.categories import router as categories_router
from revisit_admin.api.models import notification_payload
from revisit_admin.api.ui import ADMIN_UI_HTML
from revisit_admin.app_logging import configure_logging
from revisit_admin.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Category admin started with %d categories (storage: %s)",
            len(app.state.container.category_store.list()),
            app.state.container.settings.storage_path,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(auth_router)
    app.include_router(categories_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/notifications")
    async def notifications(request: Request) -> dict[str, object]:
        """Return and clear pending user notifications."""
        state_container: AppContainer = request.app.state.container
        return {
            "notifications": [
                notification_payload(notification)
                for notification in state_container.notifications.drain()
            ]
        }

    @app.get("/", response_class=HTMLResponse)
    @app.get("/ui", response_class=HTMLResponse)
    async def admin_ui() -> HTMLResponse:
        """Single-page admin UI that consumes the API."""
        return HTMLResponse(ADMIN_UI_HTML)

    return app
