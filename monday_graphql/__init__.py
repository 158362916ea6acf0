"""
monday.com GraphQL API client.

    from monday_graphql import MondayClient

    client = MondayClient(token="...")
    response = client.board.query(args={"ids": [123]}, select=["id", "name"])
    boards = response.dig("data", "boards")
"""

from .client import (
    MondayClient,
    MondayClientError,
    AuthorizationError,
    InvalidRequestError,
    ResourceNotFoundError,
    RateLimitError,
    InternalServerError,
    ComplexityError,
    format_args,
    format_select,
)
from .config import Configuration, build_config, get_settings
from .models import Response

__version__ = "1.0.0"

__all__ = [
    "MondayClient",
    "MondayClientError",
    "AuthorizationError",
    "InvalidRequestError",
    "ResourceNotFoundError",
    "RateLimitError",
    "InternalServerError",
    "ComplexityError",
    "format_args",
    "format_select",
    "Configuration",
    "build_config",
    "get_settings",
    "Response",
]
