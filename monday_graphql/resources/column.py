"""monday.com column resource."""

from ..client.queries import build_mutation, build_query, format_arguments
from ..deprecation import warn
from .base import Resource

DEFAULT_SELECT = ("id", "title", "description")
VALUE_SELECT = ("id", "name")


class Column(Resource):
    """
    Represents monday.com's column resource.

    Column values are JSON; pass them as dicts and they are encoded into the
    string literal monday.com expects::

        client.column.change_value(args={
            "board_id": 123,
            "item_id": 456,
            "column_id": '"status"',
            "value": {"label": "Done"},
        })
    """

    def query(self, args=None, select=DEFAULT_SELECT):
        """Retrieve the columns of the boards matching ``args``."""
        return self._request(build_query("boards", args, [{"columns": select}]))

    def column_values(self, board_ids=(), item_ids=(), select=DEFAULT_SELECT):
        """Retrieve column values of items on boards."""
        warn("column_values", "2.0.0", alternative="item.column_values")

        board_args = {"ids": list(board_ids)} if board_ids else None
        item_args = {"ids": list(item_ids)} if item_ids else None
        items_field = f"items{format_arguments(item_args)}"
        select = [{items_field: [{"column_values": select}]}]
        return self._request(build_query("boards", board_args, select))

    def create(self, args=None, select=DEFAULT_SELECT):
        return self._request(build_mutation("create_column", args, select))

    def change_title(self, args=None, select=DEFAULT_SELECT):
        return self._request(build_mutation("change_column_title", args, select))

    def change_metadata(self, args=None, select=DEFAULT_SELECT):
        return self._request(build_mutation("change_column_metadata", args, select))

    def change_value(self, args=None, select=VALUE_SELECT):
        """Change a column value; ``value`` is JSON. Returns the item."""
        return self._request(build_mutation("change_column_value", args, select))

    def change_simple_value(self, args=None, select=VALUE_SELECT):
        """Change a column value from its plain string form."""
        return self._request(build_mutation("change_simple_column_value", args, select))

    def change_multiple_values(self, args=None, select=VALUE_SELECT):
        """Change several column values of one item at once."""
        return self._request(build_mutation("change_multiple_column_values", args, select))

    def delete(self, board_id, column_id, select=("id",)):
        # column IDs are strings, quote them even when single-word
        args = {"board_id": board_id, "column_id": f'"{column_id}"'}
        return self._request(build_mutation("delete_column", args, select))
