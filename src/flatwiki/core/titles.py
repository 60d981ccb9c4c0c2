"""Title validation for page routes.

Every page route has the form ``/<action>/<title>`` where the title is one
or more ASCII letters or digits. This is the only input check in the
application; since titles cannot contain slashes or dots they are safe to
use as file names.
"""

import functools
import re
from collections.abc import Awaitable, Callable

from aiohttp import web

VALID_PATH = re.compile(r"^/(edit|save|view)/([a-zA-Z0-9]+)$")
VALID_TITLE = re.compile(r"^[a-zA-Z0-9]+$")

TitleHandler = Callable[[web.Request, str], Awaitable[web.StreamResponse]]
Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


def is_valid_title(title: str) -> bool:
    return VALID_TITLE.fullmatch(title) is not None


def parse_path(path: str) -> tuple[str, str] | None:
    """Split a page route into action and title.

    Args:
        path: Request path, e.g. "/view/FrontPage"

    Returns:
        (action, title) tuple, or None if the path is not a valid page route
    """
    match = VALID_PATH.fullmatch(path)
    if match is None:
        return None
    return match.group(1), match.group(2)


def make_handler(fn: TitleHandler) -> Handler:
    """Adapt a title-taking handler into an aiohttp request handler.

    The wrapped handler responds 404 without calling ``fn`` when the request
    path is not a valid page route.
    """

    @functools.wraps(fn)
    async def handler(request: web.Request) -> web.StreamResponse:
        parsed = parse_path(request.path)
        if parsed is None:
            raise web.HTTPNotFound()
        _, title = parsed
        return await fn(request, title)

    return handler
