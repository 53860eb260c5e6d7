"""
HTML page templates.

Each template is a rendering function ``(out, version_info, repo_count)``
that writes a complete UTF-8 page into a binary buffer. Write failures
are not caught.
"""

from html import escape
from string import Template
from typing import BinaryIO

_LAYOUT = Template(
    """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>$title</title>
</head>
<body>
<main>
<h1>$heading</h1>
$content
</main>
<footer>
<p>Serving $repo_count repositories | $version_info</p>
</footer>
</body>
</html>
"""
)


def _render(
    out: BinaryIO,
    *,
    title: str,
    heading: str,
    content: str,
    version_info: str,
    repo_count: int,
) -> None:
    page = _LAYOUT.substitute(
        title=escape(title),
        heading=escape(heading),
        content=content,
        version_info=escape(version_info),
        repo_count=repo_count,
    )
    out.write(page.encode("utf-8"))


def p404_no_master(out: BinaryIO, version_info: str, repo_count: int) -> None:
    """Render the page for a repository without a master branch."""
    _render(
        out,
        title="404 Not Found",
        heading="404 Not Found",
        content=(
            '<p class="no-master">The requested repository does not have '
            "a master branch.</p>"
        ),
        version_info=version_info,
        repo_count=repo_count,
    )


def p500(out: BinaryIO, version_info: str, repo_count: int) -> None:
    """Render the generic internal server error page."""
    _render(
        out,
        title="500 Internal Server Error",
        heading="500 Internal Server Error",
        content=(
            '<p class="server-error">Something went wrong while handling '
            "your request.</p>"
        ),
        version_info=version_info,
        repo_count=repo_count,
    )
