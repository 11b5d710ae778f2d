"""POST method override for clients that cannot send PUT, PATCH or DELETE.

A ``POST`` declaring ``X-HTTP-Method-Override: PATCH`` (or ``?_method=PATCH``)
is routed as a ``PATCH``. Only the verbs in :class:`OverrideMethod` are
honoured; anything else leaves the request untouched.
"""

import logging
from enum import Enum

from starlette.datastructures import Headers, QueryParams
from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)

OVERRIDE_HEADER = "x-http-method-override"
OVERRIDE_PARAM = "_method"


class OverrideMethod(str, Enum):
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, raw: str | None) -> "OverrideMethod | None":
        if not raw:
            return None
        try:
            return cls(raw.strip().upper())
        except ValueError:
            return None


def declared_override(scope: Scope) -> OverrideMethod | None:
    """Read the override verb: header first, then the ``_method`` query param."""
    raw = Headers(scope=scope).get(OVERRIDE_HEADER)
    if not raw:
        raw = QueryParams(scope.get("query_string", b"")).get(OVERRIDE_PARAM)
    return OverrideMethod.parse(raw)


def apply_method_override(scope: Scope) -> Scope:
    """Return the scope routing should see. The incoming scope is not modified."""
    if scope["type"] != "http" or scope["method"] != "POST":
        return scope
    override = declared_override(scope)
    if override is None:
        return scope
    logger.debug("Method override POST -> %s on %s", override.value, scope.get("path"))
    return {**scope, "method": override.value}


class MethodOverrideMiddleware:
    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.app(apply_method_override(scope), receive, send)
