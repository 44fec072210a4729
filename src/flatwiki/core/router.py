"""Route grammar and title extraction for incoming requests."""

import logging
import re

from fastapi import Request

from flatwiki.core.errors import InvalidPathError, InvalidTitleError

logger = logging.getLogger(__name__)

# Both patterns are applied with fullmatch.
VALID_PATH = re.compile(r"/(edit|save|view)/([a-zA-Z0-9]+)")
VALID_TITLE = re.compile(r"[a-zA-Z0-9]+")


def extract_title(path: str) -> str:
    """Extract the page title from a ``/(view|edit|save)/<title>`` path.

    Raises:
        InvalidPathError: If the path does not match the route grammar.
    """
    m = VALID_PATH.fullmatch(path)
    if m is None:
        logger.info("Invalid Path: %r", path)
        raise InvalidPathError(path)
    return m.group(2)


def validate_title(title: str) -> str:
    """Check a free-standing title against the title grammar."""
    if VALID_TITLE.fullmatch(title) is None:
        raise InvalidTitleError(title)
    return title


def page_title(request: Request) -> str:
    """Dependency: the title encoded in the request path."""
    return extract_title(request.url.path)


async def form_value(request: Request, key: str) -> str:
    """Return a form field, preferring the POST body over the query string."""
    if request.method == "POST":
        form = await request.form()
        value = form.get(key)
        if isinstance(value, str):
            return value
    return request.query_params.get(key, "")
