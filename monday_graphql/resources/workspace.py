"""monday.com workspace resource."""

from ..client.queries import build_mutation, build_query
from .base import Resource

DEFAULT_SELECT = ("id", "name", "description")


class Workspace(Resource):
    """Represents monday.com's workspace resource."""

    def query(self, args=None, select=DEFAULT_SELECT):
        return self._request(build_query("workspaces", args, select))

    def create(self, args=None, select=DEFAULT_SELECT):
        """Create a workspace (``name``, ``kind``, ``description``)."""
        return self._request(build_mutation("create_workspace", args, select))

    def delete(self, workspace_id, select=("id",)):
        args = {"workspace_id": workspace_id}
        return self._request(build_mutation("delete_workspace", args, select))
