"""monday.com update resource."""

from ..client.queries import build_mutation, build_query
from .base import Resource

DEFAULT_SELECT = ("id", "body", "created_at")


class Update(Resource):
    """Updates (comments) posted on items."""

    def query(self, args=None, select=DEFAULT_SELECT):
        return self._request(build_query("updates", args, select))

    def create(self, args=None, select=DEFAULT_SELECT):
        """Post an update on an item (``item_id``, ``body``)."""
        return self._request(build_mutation("create_update", args, select))

    def like(self, args=None, select=("id",)):
        return self._request(build_mutation("like_update", args, select))

    def clear_item_updates(self, args=None, select=("id",)):
        """Remove every update of an item."""
        return self._request(build_mutation("clear_item_updates", args, select))

    def delete(self, args=None, select=("id",)):
        return self._request(build_mutation("delete_update", args, select))
