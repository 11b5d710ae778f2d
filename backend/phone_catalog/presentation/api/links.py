"""Request-scoped LinkBuilder dependency."""

from fastapi import Request

from phone_catalog.application.links import LinkBuilder
from phone_catalog.config import get_settings


def request_origin(request: Request) -> str:
    """Scheme + Host of the incoming request, falling back to PUBLIC_BASE_URL."""
    host = request.headers.get("host")
    if not host:
        return get_settings().public_base_url
    root_path = request.scope.get("root_path", "")
    return f"{request.url.scheme}://{host}{root_path}"


def get_link_builder(request: Request) -> LinkBuilder:
    return LinkBuilder(request_origin(request))
