"""
Error-to-response mapping.

Maps a domain Error to one of two HTML pages. Only BranchNotFound gets a
dedicated 404 page; every other failure collapses to the generic 500 page
so no wrapped upstream detail reaches the client.
"""

import io
from enum import Enum
from typing import BinaryIO, Callable, Mapping

from starlette.responses import Response

from repobadge.core.statics import RepoCounter
from repobadge.domain.errors import Error, ErrorKind
from repobadge.interfaces import templates

HTTP_404 = 404
HTTP_500 = 500
HTML_CONTENT_TYPE = "text/html"

TemplateFn = Callable[[BinaryIO, str, int], None]


class ErrorPage(Enum):
    """Template selector for error responses."""

    NO_MASTER = "no_master"
    SERVER_ERROR = "server_error"


DEFAULT_TEMPLATES: Mapping[ErrorPage, TemplateFn] = {
    ErrorPage.NO_MASTER: templates.p404_no_master,
    ErrorPage.SERVER_ERROR: templates.p500,
}


def page_for(kind: ErrorKind) -> tuple[int, ErrorPage]:
    """Return the status code and page rendered for an error kind."""
    if kind is ErrorKind.BRANCH_NOT_FOUND:
        return HTTP_404, ErrorPage.NO_MASTER
    return HTTP_500, ErrorPage.SERVER_ERROR


class ErrorResponder:
    """Renders terminal request failures as HTML responses.

    The version string and repository counter are injected so pages can be
    rendered without touching real process state.
    """

    def __init__(
        self,
        version_info: str,
        repo_counter: RepoCounter,
        templates: Mapping[ErrorPage, TemplateFn] = DEFAULT_TEMPLATES,
    ) -> None:
        self._version_info = version_info
        self._repo_counter = repo_counter
        self._templates = templates

    def respond(self, error: Error) -> Response:
        """Build the response for ``error``.

        Args:
            error: The failure that terminated the request.

        Returns:
            A ``text/html`` response with status 404 or 500.
        """
        status_code, page = page_for(error.kind)
        buf = io.BytesIO()
        self._templates[page](buf, self._version_info, self._repo_counter.load())
        return Response(
            content=buf.getvalue(),
            status_code=status_code,
            headers={"content-type": HTML_CONTENT_TYPE},
        )
