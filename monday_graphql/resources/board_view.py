"""monday.com board view resource."""

from ..client.queries import build_query
from .base import Resource

DEFAULT_SELECT = ("id", "name", "type")


class BoardView(Resource):
    """Views of boards."""

    def query(self, args=None, select=DEFAULT_SELECT):
        """Retrieve the views of the boards matching ``args``."""
        return self._request(build_query("boards", args, [{"views": select}]))
