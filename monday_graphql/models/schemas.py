"""
Enum literals for monday.com GraphQL arguments.

Members render bare (unquoted) in GraphQL documents, both as top-level
arguments and inside input objects.
"""

from enum import Enum


class BoardKind(str, Enum):
    """Visibility of a board."""
    PUBLIC = "public"
    PRIVATE = "private"
    SHARE = "share"


class State(str, Enum):
    """Lifecycle state filter for boards, items and workspaces."""
    ACTIVE = "active"
    ARCHIVED = "archived"
    DELETED = "deleted"
    ALL = "all"


class ItemsQueryOperator(str, Enum):
    """How the rules of an ``items_page`` query are combined."""
    AND = "and"
    OR = "or"


class ItemsQueryRuleOperator(str, Enum):
    """Comparison applied by a single ``items_page`` rule."""
    ANY_OF = "any_of"
    NOT_ANY_OF = "not_any_of"
    IS_EMPTY = "is_empty"
    IS_NOT_EMPTY = "is_not_empty"
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUALS = "greater_than_or_equals"
    LOWER_THAN = "lower_than"
    LOWER_THAN_OR_EQUAL = "lower_than_or_equal"
    BETWEEN = "between"
    CONTAINS_TEXT = "contains_text"
    NOT_CONTAINS_TEXT = "not_contains_text"
