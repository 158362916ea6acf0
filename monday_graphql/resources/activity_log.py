"""monday.com activity log resource."""

from ..client.queries import build_query, format_arguments
from .base import Resource, as_id_list

DEFAULT_SELECT = ("id", "event", "data")


class ActivityLog(Resource):
    """Activity logs of boards."""

    def query(self, board_ids, args=None, select=DEFAULT_SELECT):
        """
        Retrieve the activity logs for one or more boards.

        Args:
            board_ids: Board ID or list of board IDs
            args: Filters for the logs (``from``, ``to``, ``limit``, ...)
            select: Fields to retrieve for each log entry
        """
        logs_field = f"activity_logs{format_arguments(args)}"
        query = build_query("boards", {"ids": as_id_list(board_ids)}, [{logs_field: select}])
        return self._request(query)
