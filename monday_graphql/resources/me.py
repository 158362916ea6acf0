"""monday.com current user resource."""

from ..client.queries import build_query
from .base import Resource

DEFAULT_SELECT = ("id", "name")


class Me(Resource):
    """The user the API token belongs to."""

    def query(self, select=DEFAULT_SELECT):
        """Retrieve the user the API token belongs to."""
        return self._request(build_query("me", select=select))
