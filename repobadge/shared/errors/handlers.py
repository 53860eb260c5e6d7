"""
Centralized error handlers for FastAPI.

Maps domain errors to HTML error pages through the ErrorResponder.
No stack traces or upstream messages are exposed to clients; the
diagnostic text of each error is logged server-side only.
"""

import logging

from fastapi import FastAPI, Request
from starlette.responses import Response

from repobadge.domain.errors import BranchNotFoundError, Error, InternalError
from repobadge.shared.errors.responses import ErrorResponder

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI, responder: ErrorResponder) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
        responder: Renders the error page for a failure.
    """

    @app.exception_handler(Error)
    async def handle_error(_request: Request, exc: Error) -> Response:
        """Handle any failure from the domain taxonomy."""
        if isinstance(exc, BranchNotFoundError):
            logger.warning("Request failed: %s", exc)
        else:
            logger.error("Request failed: %s", exc)
        return responder.respond(exc)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> Response:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return responder.respond(InternalError())
