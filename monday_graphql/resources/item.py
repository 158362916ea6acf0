"""monday.com item resource."""

from ..client.queries import build_mutation, build_query
from .base import Resource

DEFAULT_SELECT = ("id", "name", "created_at")


class Item(Resource):
    """Represents monday.com's item resource."""

    def query(self, args=None, select=DEFAULT_SELECT):
        """
        Retrieve items.

        Args:
            args: Filters (``ids``, ``limit``, ...)
            select: Fields to retrieve; ID, name and created_at by default
        """
        return self._request(build_query("items", args, select))

    def create(self, args=None, select=DEFAULT_SELECT):
        """Create an item (``board_id``, ``item_name``, ``column_values``, ...)."""
        return self._request(build_mutation("create_item", args, select))

    def duplicate(self, board_id, item_id, with_updates, select=DEFAULT_SELECT):
        args = {"board_id": board_id, "item_id": item_id, "with_updates": with_updates}
        return self._request(build_mutation("duplicate_item", args, select))

    def archive(self, item_id, select=("id",)):
        return self._request(build_mutation("archive_item", {"item_id": item_id}, select))

    def delete(self, item_id, select=("id",)):
        return self._request(build_mutation("delete_item", {"item_id": item_id}, select))
