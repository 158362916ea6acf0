"""monday.com GraphQL API client module."""

from .client import MondayClient, RESOURCES
from .errors import (
    MondayClientError,
    AuthorizationError,
    InvalidRequestError,
    ResourceNotFoundError,
    RateLimitError,
    InternalServerError,
    ComplexityError,
    classify,
)
from .queries import (
    format_args,
    format_arguments,
    format_select,
    format_graphql_object,
    build_document,
    build_query,
    build_mutation,
)

__all__ = [
    "MondayClient",
    "RESOURCES",
    "MondayClientError",
    "AuthorizationError",
    "InvalidRequestError",
    "ResourceNotFoundError",
    "RateLimitError",
    "InternalServerError",
    "ComplexityError",
    "classify",
    "format_args",
    "format_arguments",
    "format_select",
    "format_graphql_object",
    "build_document",
    "build_query",
    "build_mutation",
]
