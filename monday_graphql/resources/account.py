"""monday.com account resource."""

from ..client.queries import build_query
from .base import Resource

DEFAULT_SELECT = ("id", "name")


class Account(Resource):
    """The account of the authenticated user."""

    def query(self, select=DEFAULT_SELECT):
        """Retrieve the account details (ID and name by default)."""
        return self._request(build_query("users", select=[{"account": select}]))
