"""monday.com group resource."""

from ..client.queries import build_mutation, build_query
from .base import Resource

DEFAULT_SELECT = ("id", "title")


class Group(Resource):
    """Represents monday.com's group resource."""

    def query(self, args=None, select=DEFAULT_SELECT):
        """Retrieve the groups of the boards matching ``args``."""
        return self._request(build_query("boards", args, [{"groups": select}]))

    def create(self, args=None, select=DEFAULT_SELECT):
        return self._request(build_mutation("create_group", args, select))

    def update(self, args=None, select=("id",)):
        return self._request(build_mutation("update_group", args, select))

    def delete(self, args=None, select=("id",)):
        return self._request(build_mutation("delete_group", args, select))

    def archive(self, args=None, select=("id",)):
        return self._request(build_mutation("archive_group", args, select))

    def duplicate(self, args=None, select=DEFAULT_SELECT):
        return self._request(build_mutation("duplicate_group", args, select))

    def move_item(self, args=None, select=("id",)):
        """Move an item to another group of the same board."""
        return self._request(build_mutation("move_item_to_group", args, select))
