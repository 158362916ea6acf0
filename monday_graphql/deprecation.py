"""Deprecation notices for client operations scheduled for removal."""

import logging
import warnings
from typing import Optional

logger = logging.getLogger(__name__)


def warn(method_name: str, removal_version: str, alternative: Optional[str] = None) -> str:
    """
    Issue a deprecation warning for a client operation.

        warn("items", "2.0.0", alternative="items_page")
        # [DEPRECATION] `items` is deprecated and will be removed in v2.0.0. Use `items_page` instead.

    Args:
        method_name: The deprecated operation
        removal_version: Version in which it will be removed
        alternative: Recommended replacement, if any

    Returns:
        The warning message
    """
    message = f"[DEPRECATION] `{method_name}` is deprecated and will be removed in v{removal_version}."
    if alternative:
        message += f" Use `{alternative}` instead."

    logger.warning(message)
    # stacklevel 3 points at the caller of the deprecated resource method
    warnings.warn(message, DeprecationWarning, stacklevel=3)
    return message
