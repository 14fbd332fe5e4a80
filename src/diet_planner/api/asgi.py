"""ASGI entrypoint for the diet plan generator."""

from diet_planner.api.app import create_app
from diet_planner.containers import build_container

app = create_app(build_container())
