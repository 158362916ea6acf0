"""
Response envelope for monday.com API calls.
"""

from types import MappingProxyType
from typing import Any, Mapping

import httpx
from pydantic import BaseModel, Field, field_validator


# monday.com answers HTTP 200 for GraphQL, complexity and rate-limit
# errors, signalling them through these body keys instead.
ERROR_OBJECT_KEYS = frozenset({"errors", "error_code", "error_message", "status_code"})


class Response(BaseModel):
    """
    Status code, parsed body and headers of a monday.com API response.

    ``body`` and ``headers`` are read-only mappings, so ``success`` cannot
    change after construction.
    """
    status: int
    body: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)
    headers: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    class Config:
        frozen = True

    @field_validator("body", "headers")
    @classmethod
    def _read_only(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @classmethod
    def from_http(cls, response: httpx.Response) -> "Response":
        """
        Wrap a raw httpx response.

        A JSON body that is not an object (``null``, a list, a bare string,
        e.g. from a proxy error page) is kept under ``body["data"]`` so the
        status can still be classified.

        Args:
            response: Transport response

        Returns:
            Response envelope

        Raises:
            json.JSONDecodeError: If the body is not valid JSON
        """
        body = response.json()
        if not isinstance(body, dict):
            body = {"data": body}

        return cls(
            status=response.status_code,
            body=body,
            headers=dict(response.headers),
        )

    @property
    def success(self) -> bool:
        """True for a 2XX status whose body carries no error keys."""
        return 200 <= self.status <= 299 and not self.has_errors

    @property
    def has_errors(self) -> bool:
        """Whether the body carries any error indicator key."""
        return not ERROR_OBJECT_KEYS.isdisjoint(self.body)

    def dig(self, *path: Any, default: Any = None) -> Any:
        """
        Look up a nested value in the body.

            response.dig("data", "boards", 0, "items_page", "cursor")

        Returns ``default`` as soon as a key or index is missing.
        """
        node: Any = self.body
        for key in path:
            try:
                node = node[key]
            except (KeyError, IndexError, TypeError):
                return default
        return node
