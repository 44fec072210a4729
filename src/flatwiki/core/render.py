"""Bridge between request handlers and the Jinja2 template set."""

import logging
from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from flatwiki.core.errors import RenderError
from flatwiki.core.models import Page

logger = logging.getLogger(__name__)


class Renderer:
    """Renders pages through a template set loaded once at startup.

    The template set is never mutated after construction, so a single
    instance is shared by all requests.
    """

    def __init__(self, directory: Path, **env_globals: Any):
        self.templates = Jinja2Templates(directory=str(directory))
        self.templates.env.globals.update(env_globals)

    def render(
        self, request: Request, name: str, page: Page | None = None
    ) -> HTMLResponse:
        """Render ``<name>.html`` with ``page`` in the context.

        Raises:
            RenderError: If the template is missing or fails to render.
        """
        logger.info("%s: %s", name, page.title if page is not None else "Home")
        try:
            return self.templates.TemplateResponse(
                request, f"{name}.html", {"page": page}
            )
        except TemplateError as e:
            raise RenderError(name, str(e) or type(e).__name__) from e
