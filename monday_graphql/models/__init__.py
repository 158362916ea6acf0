"""Data models for the monday.com GraphQL client."""

from .response import Response
from .schemas import (
    BoardKind,
    State,
    ItemsQueryOperator,
    ItemsQueryRuleOperator,
)

__all__ = [
    "Response",
    "BoardKind",
    "State",
    "ItemsQueryOperator",
    "ItemsQueryRuleOperator",
]
