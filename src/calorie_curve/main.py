"""Run the API server."""

import uvicorn

from calorie_curve.api.app import create_app
from calorie_curve.config import Settings
from calorie_curve.containers import build_container


def main() -> None:
    """Serve the API on the configured host and port."""
    settings = Settings()
    app = create_app(build_container(settings))
    print(f"CalorieCurve server listening on http://{settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")


if __name__ == "__main__":
    main()
