"""ASGI entrypoint for the feeding tracker API."""

from babyfeed.api.app import create_app
from babyfeed.containers import build_container

app = create_app(build_container())
