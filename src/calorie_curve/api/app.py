"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from calorie_curve.api.models import (
    FoodsResponse,
    SuggestionRequest,
    SuggestionResponse,
)
from calorie_curve.app_logging import configure_logging
from calorie_curve.config import parse_allowed_origins
from calorie_curve.containers import AppContainer
from calorie_curve.domain.errors import (
    CalorieCurveError,
    GeneratorError,
    GeneratorNotConfiguredError,
    SchemaError,
    UpstreamFormatError,
    ValidationError,
)

_GENERATOR_FAILURE = "Generator request failed"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(
        container.settings.log_level,
        local=container.settings.environment == "local",
    )
    logger = logging.getLogger(__name__)
    allowed_origins = parse_allowed_origins(container.settings.cors_origins)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins or ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(CalorieCurveError)
    async def handle_error(request: Request, exc: CalorieCurveError) -> JSONResponse:
        status_code, message = _error_response(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.warning(
                "%s %s failed: %s: %s",
                request.method,
                request.url.path,
                type(exc).__name__,
                exc,
            )
        return JSONResponse(status_code=status_code, content={"error": message})

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        """Readiness message."""
        return "CalorieCurve API OK"

    @app.get("/healthz", response_class=PlainTextResponse)
    async def healthz() -> str:
        """Plain-text health check for deployment platforms."""
        return "ok"

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/foods")
    async def foods(request: Request, query: str = "") -> FoodsResponse:
        """Look up nutrition for a free-text food query."""
        state_container: AppContainer = request.app.state.container
        records = await state_container.lookup_service.lookup(query)
        return FoodsResponse(results=records)

    @app.post("/api/suggestions")
    async def suggestions(
        request: Request, payload: SuggestionRequest | None = None
    ) -> SuggestionResponse:
        """Suggest food-based actions to close nutrient gaps."""
        state_container: AppContainer = request.app.state.container
        if payload is None:
            payload = SuggestionRequest()
        tips = await state_container.suggestion_service.suggest(
            payload.total_nutrients,
            payload.daily_goals,
            payload.meals,
        )
        return SuggestionResponse(suggestions=tips)

    return app


def _error_response(exc: CalorieCurveError) -> tuple[int, str]:
    """Map a core error to an HTTP status and message."""
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST, str(exc)
    if isinstance(exc, GeneratorNotConfiguredError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc)
    if isinstance(exc, GeneratorError):
        return status.HTTP_502_BAD_GATEWAY, _GENERATOR_FAILURE
    if isinstance(exc, UpstreamFormatError | SchemaError):
        return status.HTTP_502_BAD_GATEWAY, str(exc)
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
