"""
GraphQL document builders for the monday.com API.

Arguments and field selections are plain Python data; these helpers render
them into the string fragments of a GraphQL document. Nothing here validates
against the monday.com schema: a malformed document is only reported by the
API itself.
"""

import json
import re
from enum import Enum
from typing import Any, Iterable, Mapping, Optional


_WHITESPACE_RE = re.compile(r"\s")


def format_args(args: Mapping[str, Any]) -> str:
    """
    Convert an argument mapping into a GraphQL argument list (no parentheses).

    Single-word strings are emitted bare so they can act as enum literals,
    strings containing whitespace are double quoted::

        format_args({"board_name": "New test board", "board_kind": "private"})
        # 'board_name: "New test board", board_kind: private'

    A single-word value meant as a string (e.g. a status label ``Stuck``)
    must be quoted by the caller beforehand: ``'"Stuck"'``. Embedded quotes
    are not escaped.

    Args:
        args: Ordered mapping of argument name to value

    Returns:
        Comma separated ``key: value`` pairs, or "" for an empty mapping
    """
    return ", ".join(f"{key}: {_format_arg_value(value)}" for key, value in args.items())


def format_arguments(args: Optional[Mapping[str, Any]]) -> str:
    """Parenthesised argument list, or "" when there are no arguments."""
    if not args:
        return ""
    return f"({format_args(args)})"


def format_select(select: Iterable[Any]) -> str:
    """
    Convert a field selection into a GraphQL selection set body.

    Nested selections are given as mappings of field name to sub-selection
    and are rendered recursively::

        format_select(["id", {"columns": ["id", "title"]}, "name"])
        # 'id columns { id title } name'

    Args:
        select: Ordered field names and/or nested mappings

    Returns:
        Space separated selection, or "" for an empty sequence
    """
    parts = []
    for item in select:
        if isinstance(item, Mapping):
            for field, subselect in item.items():
                if isinstance(subselect, str):
                    subselect = [subselect]
                parts.append(f"{field} {{ {format_select(subselect)} }}")
        else:
            parts.append(str(item))
    return " ".join(parts)


def format_graphql_object(obj: Mapping[str, Any]) -> str:
    """
    Render a mapping as a GraphQL input object literal.

    Unlike ``format_args`` strings are always quoted here; use Enum members
    for enum literals::

        format_graphql_object({"rules": [{"column_id": "status", "compare_value": [1]}],
                               "operator": ItemsQueryOperator.AND})
        # '{rules: [{column_id: "status", compare_value: [1]}], operator: and}'
    """
    pairs = ", ".join(f"{key}: {_format_object_value(value)}" for key, value in obj.items())
    return f"{{{pairs}}}"


def build_document(
    operation: str,
    field: str,
    args: Optional[Mapping[str, Any]] = None,
    select: Optional[Iterable[Any]] = None,
) -> str:
    """
    Assemble a complete GraphQL document.

    Args:
        operation: ``query``, ``mutation``, or a named operation with
            variable definitions (``mutation add_file($file: File!)``)
        field: Root field or mutation name
        args: Arguments for the root field
        select: Selection for the root field; None omits the selection set

    Returns:
        GraphQL document string
    """
    root = f"{field}{format_arguments(args)}"
    if select is not None:
        root = f"{root} {{ {format_select(select)} }}"
    return f"{operation} {{ {root} }}"


def build_query(
    field: str,
    args: Optional[Mapping[str, Any]] = None,
    select: Optional[Iterable[Any]] = None,
) -> str:
    """Assemble a ``query`` document."""
    return build_document("query", field, args, select)


def build_mutation(
    field: str,
    args: Optional[Mapping[str, Any]] = None,
    select: Optional[Iterable[Any]] = None,
) -> str:
    """Assemble a ``mutation`` document."""
    return build_document("mutation", field, args, select)


# ------------------------------------------------------------------
#  Value rendering
# ------------------------------------------------------------------

def _is_single_word(text: str) -> bool:
    return _WHITESPACE_RE.search(text.strip()) is None


def _format_arg_value(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, str):
        return value if _is_single_word(value) else f'"{value}"'
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, Mapping):
        # monday.com takes JSON payloads (column_values etc.) as string literals
        return json.dumps(json.dumps(value))
    if isinstance(value, (list, tuple)):
        return _format_list(value)
    return str(value)


def _format_list(values) -> str:
    items = []
    for value in values:
        if isinstance(value, str) and not isinstance(value, Enum):
            items.append(json.dumps(value))
        else:
            items.append(_format_arg_value(value))
    return f"[{', '.join(items)}]"


def _format_object_value(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, str):
        return json.dumps(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, Mapping):
        return format_graphql_object(value)
    if isinstance(value, (list, tuple)):
        return f"[{', '.join(_format_object_value(item) for item in value)}]"
    return str(value)
