"""ASGI entrypoint for the CalorieCurve API."""

from calorie_curve.api.app import create_app
from calorie_curve.containers import build_container

app = create_app(build_container())
