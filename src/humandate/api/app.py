"""FastAPI application factory."""
from __future__ import annotations
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from ..config import Settings
from ..languages.registry import get_registry
from .middleware import RequestLoggingMiddleware
from .routes import dates, health


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    # Fail at startup rather than on the first request
    get_registry().get(settings.default_language)

    app = FastAPI(
        title="HumanDate API",
        description="Parse and format human-typed dates",
        version="0.1.0",
    )

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings

    app.include_router(health.router, tags=["health"])
    app.include_router(dates.router, prefix="/v1", tags=["dates"])

    return app
