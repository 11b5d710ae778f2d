"""Abstract interface (port) for signing and verifying bearer tokens."""

from abc import ABC, abstractmethod
from typing import Any


class TokenCodec(ABC):
    """Port for bearer-token encoding: implemented in the infrastructure layer."""

    @abstractmethod
    def encode(self, claims: dict[str, Any]) -> str:
        """Sign the claims and return a compact token string."""
        ...

    @abstractmethod
    def decode(self, token: str) -> dict[str, Any]:
        """Verify a token and return its claims.

        Raises:
            AuthenticationError: If the token is malformed, forged or expired.
        """
        ...
