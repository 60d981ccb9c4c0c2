"""Page view, edit and save endpoints.

Handlers receive an already validated title (see ``make_handler``).
"""

import logging

from aiohttp import web
from jinja2 import TemplateError

from flatwiki.app_keys import front_page_key, store_key, templates_key
from flatwiki.core.store import Page
from flatwiki.core.titles import make_handler

logger = logging.getLogger(__name__)


def create_pages_routes() -> list[web.RouteDef]:
    return [
        web.get("/", front_page),
        web.get("/view/{title}", make_handler(view_page)),
        web.get("/edit/{title}", make_handler(edit_page)),
        web.post("/save/{title}", make_handler(save_page)),
    ]


async def front_page(request: web.Request) -> web.StreamResponse:
    raise web.HTTPFound(f"/view/{request.app[front_page_key]}")


async def view_page(request: web.Request, title: str) -> web.StreamResponse:
    store = request.app[store_key]
    try:
        page = store.load(title)
    except OSError as e:
        logger.debug(f"Page {title} not loaded ({e}), redirecting to editor")
        raise web.HTTPFound(f"/edit/{title}") from e

    return render_template(request, "view", page)


async def edit_page(request: web.Request, title: str) -> web.StreamResponse:
    store = request.app[store_key]
    try:
        page = store.load(title)
    except OSError:
        page = Page(title=title, body=b"")

    return render_template(request, "edit", page)


async def save_page(request: web.Request, title: str) -> web.StreamResponse:
    form = await request.post()
    field = form.get("body", "")
    if isinstance(field, web.FileField):
        body = field.file.read()
    else:
        body = field.encode("utf-8")
    page = Page(title=title, body=body)

    try:
        request.app[store_key].save(page)
    except OSError as e:
        logger.error(f"Failed to save page {title}: {e}")
        return web.Response(status=500, text=str(e))

    logger.info(f"Saved page {title} ({len(page.body)} bytes)")
    raise web.HTTPFound(f"/view/{title}")


def render_template(request: web.Request, name: str, page: Page) -> web.Response:
    """Render a named template into an HTML response.

    Rendering errors become a 500 response carrying the error message.
    """
    templates = request.app[templates_key]
    try:
        html = templates.render(name, page)
    except TemplateError as e:
        logger.error(f"Failed to render {name} template for {page.title}: {e}")
        return web.Response(status=500, text=str(e))

    return web.Response(text=html, content_type="text/html")
