"""monday.com subitem resource."""

from ..client.queries import build_mutation, build_query
from .base import Resource

DEFAULT_SELECT = ("id", "name", "created_at")


class Subitem(Resource):
    """Subitems of items."""

    def query(self, args=None, select=DEFAULT_SELECT):
        """Retrieve the subitems of the items matching ``args``."""
        return self._request(build_query("items", args, [{"subitems": select}]))

    def create(self, args=None, select=DEFAULT_SELECT):
        """Create a subitem (``parent_item_id``, ``item_name``, ...)."""
        return self._request(build_mutation("create_subitem", args, select))
