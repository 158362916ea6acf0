"""monday.com file resource."""

from ..client.queries import build_document, build_mutation
from .base import Resource

DEFAULT_SELECT = ("id",)


class File(Resource):
    """
    File uploads to file columns and updates.

    ``args["file"]`` is sent as the multipart ``$file`` variable; it may be
    an open file, raw bytes, or a ``(filename, content, content_type)``
    tuple::

        with open("report.pdf", "rb") as fh:
            client.file.add_file_to_column(args={
                "item_id": 456,
                "column_id": '"files"',
                "file": ("report.pdf", fh, "application/pdf"),
            })
    """

    def add_file_to_column(self, args, select=DEFAULT_SELECT):
        args, variables = _split_file(args)
        query = build_document("mutation add_file($file: File!)", "add_file_to_column", args, select)
        return self._file_request(query, variables)

    def add_file_to_update(self, args, select=DEFAULT_SELECT):
        args, variables = _split_file(args)
        query = build_document("mutation ($file: File!)", "add_file_to_update", args, select)
        return self._file_request(query, variables)

    def clear_file_column(self, args, select=DEFAULT_SELECT):
        """Remove every file from a file column of an item."""
        args = dict(args, value={"clear_all": True})
        return self._request(build_mutation("change_column_value", args, select))


def _split_file(args):
    args = dict(args)
    variables = {"file": args.pop("file")}
    args["file"] = "$file"
    return args, variables
