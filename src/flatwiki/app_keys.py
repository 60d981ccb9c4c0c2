"""Application keys for type-safe app configuration access."""

from aiohttp import web

from flatwiki.core.store import PageStore
from flatwiki.core.templates import PageTemplates

store_key = web.AppKey("store", PageStore)
templates_key = web.AppKey("templates", PageTemplates)
front_page_key = web.AppKey("front_page", str)
