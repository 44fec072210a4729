"""FlatWiki FastAPI application."""

import logging
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.responses import RedirectResponse

from flatwiki.config import settings
from flatwiki.core.errors import PageNotFoundError, exception_handlers
from flatwiki.core.models import Page
from flatwiki.core.render import Renderer
from flatwiki.core.router import form_value, page_title, validate_title
from flatwiki.core.storage import FileStorage

logging.basicConfig(level=settings.log_level)

logger = logging.getLogger(__name__)

METHODS = ["GET", "POST"]

NEW_PAGE = Page(title="Title", body=b"Enter text here...")

# Initialize app
app = FastAPI(
    title=settings.app_title,
    debug=settings.debug,
    exception_handlers=exception_handlers,
)

# Setup templates and storage
templates_path = Path(__file__).parent / "templates"

renderer = Renderer(templates_path, app_title=settings.app_title)
storage = FileStorage(settings.data_dir)


async def view_page(request: Request, title: str = Depends(page_title)):
    """View a wiki page."""
    try:
        page = await storage.load(title)
    except PageNotFoundError:
        # Page doesn't exist - redirect to edit to create it
        return RedirectResponse(url=f"/edit/{title}", status_code=302)
    return renderer.render(request, "view", page)


async def new_page(request: Request):
    """Blank form for creating a page under a title of the user's choice."""
    return renderer.render(request, "new", NEW_PAGE)


async def edit_page(request: Request, title: str = Depends(page_title)):
    """Edit page form."""
    try:
        page = await storage.load(title)
    except PageNotFoundError:
        page = Page(title=title)
    return renderer.render(request, "edit", page)


async def save_page(request: Request, title: str = Depends(page_title)):
    """Save page content."""
    body = await form_value(request, "body")
    page = await storage.save(Page(title=title, body=body.encode("utf-8")))
    logger.info("save: %s", page.title)
    return RedirectResponse(url=f"/view/{page.title}", status_code=302)


async def create_page(request: Request):
    """Create a page from the new-page form."""
    title = validate_title(await form_value(request, "title"))
    body = await form_value(request, "body")
    page = await storage.save(Page(title=title, body=body.encode("utf-8")))
    logger.info("save: %s", page.title)
    return RedirectResponse(url=f"/view/{page.title}", status_code=302)


async def home(request: Request):
    """Home page."""
    return renderer.render(request, "home")


# Route table, registered in order; the first matching route wins, so
# /edit/new must precede /edit/{name}. "/" and "/create/" match exactly and
# every other path is a 404.
ROUTES = [
    ("/view/{name}", view_page),
    ("/edit/new", new_page),
    ("/edit/{name}", edit_page),
    ("/save/{name}", save_page),
    ("/create/", create_page),
    ("/", home),
]

for route_path, endpoint in ROUTES:
    app.add_api_route(route_path, endpoint, methods=METHODS)
