"""ASGI entrypoint for the category admin API."""

from revisit_admin.api.app import create_app
from revisit_admin.containers import build_container

app = create_app(build_container())
