"""Request gates for the JSON-only API.

``AcceptJsonMiddleware`` answers 406 to clients that cannot take JSON back;
``WriteContentTypeMiddleware`` answers 415 to write bodies that are neither
JSON nor multipart form data.
"""

from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Receive, Scope, Send

_JSON_RANGES = frozenset({"application/json", "application/*", "*/*"})
_WRITE_METHODS = frozenset({"POST", "PUT", "PATCH"})


def accepts_json(accept: str | None) -> bool:
    """True when the Accept header admits ``application/json``.

    A missing or blank header accepts anything. Ranges with ``q=0`` are
    explicit refusals and do not count.
    """
    if accept is None or not accept.strip():
        return True
    for part in accept.split(","):
        media, *params = (piece.strip() for piece in part.split(";"))
        if media.lower() not in _JSON_RANGES:
            continue
        refused = False
        for param in params:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                try:
                    refused = float(value) == 0
                except ValueError:
                    refused = False
        if not refused:
            return True
    return False


def is_writable_content_type(content_type: str | None) -> bool:
    if not content_type:
        return False
    media = content_type.split(";", 1)[0].strip().lower()
    return (
        media == "application/json"
        or media.endswith("+json")
        or media == "multipart/form-data"
    )


def has_body(headers: Headers) -> bool:
    if "transfer-encoding" in headers:
        return True
    try:
        return int(headers.get("content-length", "0")) > 0
    except ValueError:
        return False


class AcceptJsonMiddleware:
    """Rejects non-OPTIONS requests whose Accept header excludes JSON."""

    def __init__(self, app: ASGIApp, exempt_prefixes: tuple[str, ...] = ()):
        self.app = app
        self.exempt_prefixes = exempt_prefixes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if (
            scope["type"] != "http"
            or scope["method"] == "OPTIONS"
            or scope["path"].startswith(self.exempt_prefixes)
            or accepts_json(Headers(scope=scope).get("accept"))
        ):
            await self.app(scope, receive, send)
            return

        response = JSONResponse(
            {"error": "Not Acceptable: only application/json is supported"},
            status_code=406,
        )
        await response(scope, receive, send)


class WriteContentTypeMiddleware:
    """Rejects POST/PUT/PATCH bodies that are not JSON or multipart form data."""

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["method"] in _WRITE_METHODS:
            headers = Headers(scope=scope)
            if has_body(headers) and not is_writable_content_type(headers.get("content-type")):
                response = JSONResponse(
                    {"error": "Unsupported Media Type: use application/json"},
                    status_code=415,
                )
                await response(scope, receive, send)
                return

        await self.app(scope, receive, send)
