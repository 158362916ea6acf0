"""
monday.com GraphQL API client implementation.
Handles API communication and turns failed responses into typed errors.
"""

import httpx
import logging
from typing import Any, Dict, Optional

from ..config import Configuration, build_config, get_settings
from ..models.response import Response
from ..resources import (
    Account,
    ActivityLog,
    Board,
    BoardView,
    Column,
    File,
    Folder,
    Group,
    Item,
    Me,
    Subitem,
    Update,
    Workspace,
)
from .errors import classify

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"

RESOURCES = (
    "account",
    "activity_log",
    "board",
    "board_view",
    "column",
    "file",
    "folder",
    "group",
    "item",
    "me",
    "subitem",
    "update",
    "workspace",
)


class MondayClient:
    """
    Client for interacting with monday.com GraphQL API.

    Handles:
    - API authentication
    - GraphQL request execution
    - Response wrapping and error classification

    Resources are exposed as attributes, e.g.
    ``client.board.query(args={"ids": [123]})``.
    """

    def __init__(self, config: Optional[Configuration] = None, **config_args):
        """
        Initialize the monday.com client.

        Args:
            config: Configuration to use as-is
            **config_args: Configuration options (token, host, version, ...)
                used when no config is given; with neither, the default
                settings are read from the environment

        Raises:
            ValueError: If unknown configuration options are given
        """
        if config is not None:
            self.config = config
        elif config_args:
            self.config = build_config(**config_args)
        else:
            self.config = get_settings()

        self.account = Account(self)
        self.activity_log = ActivityLog(self)
        self.board = Board(self)
        self.board_view = BoardView(self)
        self.column = Column(self)
        self.file = File(self)
        self.folder = Folder(self)
        self.group = Group(self)
        self.item = Item(self)
        self.me = Me(self)
        self.subitem = Subitem(self)
        self.update = Update(self)
        self.workspace = Workspace(self)

    @property
    def headers(self) -> Dict[str, str]:
        """Headers sent with every JSON request."""
        headers = {
            "Authorization": self.config.token or "",
            "Content-Type": JSON_CONTENT_TYPE,
        }
        if self.config.version:
            headers["API-Version"] = self.config.version
        return headers

    @property
    def timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.config.read_timeout, connect=self.config.open_timeout)

    def make_request(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Response:
        """
        Execute a GraphQL document against the monday.com API.

        Args:
            query: GraphQL document
            variables: Optional GraphQL variables

        Returns:
            The successful response

        Raises:
            MondayClientError: Typed subclass describing the failure
            json.JSONDecodeError: If the response body is not JSON
            httpx.HTTPError: For transport failures and timeouts
        """
        payload: Dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        logger.debug(f"POST {self.config.host}: {query}")

        with httpx.Client(timeout=self.timeout) as http:
            raw = http.post(self.config.host, headers=self.headers, json=payload)

        return self._handle_response(Response.from_http(raw))

    def make_file_request(self, query: str, variables: Dict[str, Any]) -> Response:
        """
        Execute a multipart GraphQL request against the file endpoint.

        Args:
            query: GraphQL document declaring a ``$file`` variable
            variables: Must contain ``file``: a file object, raw bytes or an
                httpx-style ``(filename, content[, content_type])`` tuple

        Returns:
            The successful response

        Raises:
            MondayClientError: Typed subclass describing the failure
            httpx.HTTPError: For transport failures and timeouts
        """
        # httpx builds the multipart Content-Type (with boundary) itself
        headers = {"Authorization": self.config.token or ""}
        if self.config.version:
            headers["API-Version"] = self.config.version

        logger.debug(f"POST {self.config.files_host} (multipart): {query}")

        with httpx.Client(timeout=self.timeout) as http:
            raw = http.post(
                self.config.files_host,
                headers=headers,
                data={"query": query},
                files={"variables[file]": variables["file"]},
            )

        return self._handle_response(Response.from_http(raw))

    def _handle_response(self, response: Response) -> Response:
        if response.success:
            return response

        error = classify(response)
        logger.warning(
            f"monday.com request failed: {type(error).__name__} "
            f"(status {response.status}, code {error.code}): {error.message}"
        )
        raise error
