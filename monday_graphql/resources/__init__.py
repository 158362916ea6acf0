"""monday.com API resources, one class per resource."""

from .account import Account
from .activity_log import ActivityLog
from .board import Board
from .board_view import BoardView
from .column import Column
from .file import File
from .folder import Folder
from .group import Group
from .item import Item
from .me import Me
from .subitem import Subitem
from .update import Update
from .workspace import Workspace

__all__ = [
    "Account",
    "ActivityLog",
    "Board",
    "BoardView",
    "Column",
    "File",
    "Folder",
    "Group",
    "Item",
    "Me",
    "Subitem",
    "Update",
    "Workspace",
]
