"""Routing table mapping whitelisted paths to handlers."""

from collections.abc import Callable, Iterable
from pathlib import Path

from config import TEMPLATE_PATH, VALID_PATHS
from handlers.static_handlers import render_template, serve_static
from request import HTTPRequest
from response import HTTPResponse

Handler = Callable[[HTTPRequest, Path], HTTPResponse]


class Router:
    def __init__(self) -> None:
        self._routes: dict[str, Handler] = {}

    def add_route(self, path: str, handler: Handler) -> None:
        if not path.startswith("/"):
            raise ValueError("path must start with '/'")
        self._routes[path] = handler

    def resolve(self, path: str) -> Handler | None:
        return self._routes.get(path)


def build_default_router(
    valid_paths: Iterable[str] = VALID_PATHS,
    template_path: str = TEMPLATE_PATH,
) -> Router:
    """Route every whitelisted path to the static handler, the template path to the renderer."""
    router = Router()
    for path in valid_paths:
        if path == template_path:
            router.add_route(path, render_template)
        else:
            router.add_route(path, serve_static)
    return router
