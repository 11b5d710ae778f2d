"""Adds an ``Allow`` header to OPTIONS responses that lack one.

CORS preflights are answered by ``CORSMiddleware`` before routing, so the
endpoint's own ``Allow`` never gets set. The value is derived from the
routes matching the request path.
"""

from collections.abc import Sequence

from starlette.datastructures import MutableHeaders
from starlette.routing import BaseRoute, Match
from starlette.types import ASGIApp, Message, Receive, Scope, Send

_METHOD_ORDER = ("GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS")


def allowed_methods(routes: Sequence[BaseRoute], scope: Scope) -> str | None:
    """Comma-separated methods of every route matching the path, or None."""
    methods: set[str] = set()
    for route in routes:
        route_methods = getattr(route, "methods", None)
        if not route_methods:
            continue
        match, _ = route.matches(scope)
        if match != Match.NONE:
            methods |= route_methods
    ordered = [method for method in _METHOD_ORDER if method in methods]
    return ", ".join(ordered) if ordered else None


class AllowHeaderMiddleware:
    def __init__(self, app: ASGIApp, routes: Sequence[BaseRoute]):
        self.app = app
        self.routes = routes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] != "OPTIONS":
            await self.app(scope, receive, send)
            return

        async def send_with_allow(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                if "allow" not in headers:
                    allow = allowed_methods(self.routes, scope)
                    if allow:
                        headers["Allow"] = allow
            await send(message)

        await self.app(scope, receive, send_with_allow)
