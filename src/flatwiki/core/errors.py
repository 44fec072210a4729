"""Wiki exceptions and their HTTP exception handlers."""

import logging

from fastapi import Request, status
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


# Exceptions
class WikiError(Exception):
    """Base class for wiki errors."""


class InvalidPathError(WikiError):
    """Request path does not match the route grammar."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Invalid Page Title: {path}")


class InvalidTitleError(WikiError):
    """A page title outside the allowed character set."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Invalid Page Title: {title!r}")


class PageNotFoundError(WikiError):
    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Page '{title}' not found")


class StorageError(WikiError):
    """Reading or writing a page failed for a reason other than absence."""

    def __init__(self, title: str, reason: str, operation: str = "save"):
        self.title = title
        self.reason = reason
        self.operation = operation
        super().__init__(reason)


class RenderError(WikiError):
    def __init__(self, template: str, reason: str):
        self.template = template
        super().__init__(reason)


# Exception handlers
def invalid_path_handler(request: Request, exc: InvalidPathError):
    return PlainTextResponse(
        "404 page not found", status_code=status.HTTP_404_NOT_FOUND
    )


def invalid_title_handler(request: Request, exc: InvalidTitleError):
    logger.warning(exc)
    return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)


def storage_error_handler(request: Request, exc: StorageError):
    logger.error("%s Failed: %s", exc.operation.capitalize(), exc)
    return PlainTextResponse(
        str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def render_error_handler(request: Request, exc: RenderError):
    logger.error("Render Failed: %s", exc)
    return PlainTextResponse(
        str(exc), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


exception_handlers = {
    InvalidPathError: invalid_path_handler,
    InvalidTitleError: invalid_title_handler,
    StorageError: storage_error_handler,
    RenderError: render_error_handler,
}
