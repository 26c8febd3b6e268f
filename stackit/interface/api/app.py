"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stackit.config import Settings
from stackit.interface.api.errors import register_exception_handlers
from stackit.interface.api.routes import (
    answers,
    health,
    notifications,
    questions,
    users,
)
from stackit.util.di.container import create_container, setup_di
from stackit.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this. Tests configure it in conftest.py.

    Args:
        container: DI container to use; the production container when omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="StackIt API",
        description="Backend API for StackIt - a question and answer forum",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(app_instance, container or create_container())

    register_exception_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(answers.router)
    app_instance.include_router(notifications.router)
    app_instance.include_router(users.router)

    return app_instance
