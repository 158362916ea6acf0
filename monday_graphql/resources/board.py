"""monday.com board resource."""

from ..client.queries import build_mutation, build_query, format_graphql_object
from ..deprecation import warn
from .base import Resource, as_id_list

DEFAULT_SELECT = ("id", "name", "description")
DEFAULT_PAGINATED_SELECT = ("id", "name")


class Board(Resource):
    """Represents monday.com's board resource."""

    def query(self, args=None, select=DEFAULT_SELECT):
        """
        Retrieve boards.

        Args:
            args: Filters (``ids``, ``limit``, ``state``, ...)
            select: Fields to retrieve; ID, name and description by default
        """
        return self._request(build_query("boards", args, select))

    def create(self, args=None, select=DEFAULT_SELECT):
        """Create a board (``board_name``, ``board_kind``, ...)."""
        return self._request(build_mutation("create_board", args, select))

    def duplicate(self, args=None, select=DEFAULT_SELECT):
        """Duplicate a board; ``select`` applies to the new board."""
        return self._request(build_mutation("duplicate_board", args, [{"board": select}]))

    def update(self, args=None):
        """Update a board attribute. The API answers with a JSON string."""
        return self._request(build_mutation("update_board", args))

    def archive(self, board_id, select=("id",)):
        return self._request(build_mutation("archive_board", {"board_id": board_id}, select))

    def delete(self, board_id, select=("id",)):
        return self._request(build_mutation("delete_board", {"board_id": board_id}, select))

    def delete_subscribers(self, board_id, user_ids, select=("id",)):
        """Remove subscribers from a board."""
        warn("delete_subscribers", "2.0.0", alternative="user.delete_from_board")

        args = {"board_id": board_id, "user_ids": as_id_list(user_ids)}
        return self._request(build_mutation("delete_subscribers_from_board", args, select))

    def items_page(self, board_ids, limit=25, cursor=None, query_params=None,
                   select=DEFAULT_PAGINATED_SELECT):
        """
        Retrieve a page of items from one or more boards.

        Uses cursor-based pagination. Cursors expire after 60 minutes.

            response = client.board.items_page(board_ids=123, limit=50)
            items = response.dig("data", "boards", 0, "items_page", "items")
            cursor = response.dig("data", "boards", 0, "items_page", "cursor")

        Args:
            board_ids: Board ID or list of board IDs
            limit: Items per page (max 500)
            cursor: Cursor from the previous page
            query_params: Filter rules, e.g.
                ``{"rules": [{"column_id": "status", "compare_value": [1]}],
                "operator": ItemsQueryOperator.AND}``
            select: Fields to retrieve for each item

        Returns:
            Response containing the items and the next cursor
        """
        page_args = [f"limit: {limit}"]
        if cursor:
            page_args.append(f'cursor: "{cursor}"')
        if query_params:
            page_args.append(f"query_params: {format_graphql_object(query_params)}")

        page_field = f"items_page({', '.join(page_args)})"
        select = [{page_field: ["cursor", {"items": select}]}]
        return self._request(build_query("boards", {"ids": as_id_list(board_ids)}, select))
