"""ASGI entrypoint for the reading tracker API."""

from ramadan_tracker.api.app import create_app
from ramadan_tracker.containers import build_container

app = create_app(build_container())
