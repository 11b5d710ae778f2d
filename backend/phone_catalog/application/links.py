"""Hypermedia link construction for the phones resource."""

from urllib.parse import urlencode

PHONES_PATH = "/phones"


class LinkBuilder:
    """Builds absolute URLs from an origin, a path and ordered query params.

    The origin is expected to come from the incoming request so links stay
    reachable behind proxies and under multiple host names.
    """

    def __init__(self, base_url: str, resource_path: str = PHONES_PATH):
        self._base_url = base_url.rstrip("/")
        self._resource_path = "/" + resource_path.strip("/")

    def absolute(self, path: str, **params: object) -> str:
        """Join ``path`` onto the origin; ``None`` params are left out."""
        url = f"{self._base_url}/{path.lstrip('/')}"
        query = [(key, str(value)) for key, value in params.items() if value is not None]
        if query:
            url = f"{url}?{urlencode(query)}"
        return url

    def collection(self, **params: object) -> str:
        return self.absolute(self._resource_path, **params)

    def item(self, phone_id: str) -> str:
        return self.absolute(f"{self._resource_path}/{phone_id}")
