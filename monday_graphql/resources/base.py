"""Base class for monday.com API resources."""

from typing import TYPE_CHECKING, Any, Dict, Optional

from ..models.response import Response

if TYPE_CHECKING:
    from ..client.client import MondayClient


class Resource:
    """
    A group of related monday.com operations.

    Resources only build GraphQL documents; sending them and handling the
    response is left to the client.
    """

    def __init__(self, client: "MondayClient"):
        self.client = client

    def _request(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Response:
        return self.client.make_request(query, variables)

    def _file_request(self, query: str, variables: Dict[str, Any]) -> Response:
        return self.client.make_file_request(query, variables)


def as_id_list(ids) -> list:
    """Normalize a single ID or a sequence of IDs to a list."""
    return list(ids) if isinstance(ids, (list, tuple)) else [ids]
