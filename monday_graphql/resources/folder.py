"""monday.com folder resource."""

from ..client.queries import build_mutation, build_query
from .base import Resource

DEFAULT_SELECT = ("id", "name")


class Folder(Resource):
    """Workspace folders."""

    def query(self, args=None, select=DEFAULT_SELECT):
        return self._request(build_query("folders", args, select))

    def create(self, args=None, select=DEFAULT_SELECT):
        return self._request(build_mutation("create_folder", args, select))

    def update(self, args=None):
        """Update a folder. The API answers with the folder ID."""
        return self._request(build_mutation("update_folder", args))

    def delete(self, folder_id, select=("id",)):
        return self._request(build_mutation("delete_folder", {"folder_id": folder_id}, select))
