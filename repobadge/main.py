"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers
- Error handlers (centralized error-to-page mapping)
- Shared process state (version string, repository counter)
- Logging configuration

No business logic belongs here.
"""

from fastapi import FastAPI

from repobadge.core.config import Settings, settings
from repobadge.core.statics import REPO_COUNT, VERSION_INFO, RepoCounter
from repobadge.interfaces.health import router as health_router
from repobadge.shared.errors.handlers import register_error_handlers
from repobadge.shared.errors.responses import ErrorResponder
from repobadge.shared.logging import configure_logging


def create_app(
    app_settings: Settings = settings,
    version_info: str = VERSION_INFO,
    repo_counter: RepoCounter = REPO_COUNT,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application. The version string
    and repository counter default to the process-wide values.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=app_settings.log_level)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
    )

    responder = ErrorResponder(version_info=version_info, repo_counter=repo_counter)
    app.state.version_info = version_info
    app.state.repo_counter = repo_counter
    app.state.error_responder = responder

    # --- Error Handlers ---
    register_error_handlers(app, responder)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")

    return app


app = create_app()
