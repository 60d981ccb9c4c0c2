"""aiohttp server for flatwiki.

Application factory and route registration.
"""

import logging

from aiohttp import web

from flatwiki.api.pages import create_pages_routes
from flatwiki.app_keys import front_page_key, store_key, templates_key
from flatwiki.config import Config
from flatwiki.core.store import PageStore
from flatwiki.core.templates import PageTemplates

logger = logging.getLogger(__name__)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Templates are parsed here, once. Everything stored on the application
    is read-only afterwards.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application

    Raises:
        jinja2.TemplateError: If the templates cannot be loaded or parsed
    """
    # Saved page bodies arrive as one form field; raise aiohttp's 1 MiB default.
    app = web.Application(client_max_size=config.server.max_body_size)

    templates = PageTemplates(config.templates.templates_dir)
    store = PageStore(config.pages.pages_dir)

    app[store_key] = store
    app[templates_key] = templates
    app[front_page_key] = config.pages.front_page

    app.router.add_routes(create_pages_routes())

    logger.debug(f"Serving pages from {store.pages_dir}")
    return app


def run_server(config: Config, app: web.Application | None = None) -> None:
    """Run the server.

    Args:
        config: Application configuration
        app: Application to serve (default: built from config)
    """
    if app is None:
        app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
