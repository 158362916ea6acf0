"""
Error taxonomy for monday.com API failures and the classifier that maps a
failed response onto it.

Every error carries the same contract (``message``, ``code``,
``error_data`` and the originating ``response``); the class itself is the
only thing that tells the kinds apart.
"""

import json
import logging
import re
from typing import Any, Dict, Optional, Tuple, Type

from ..models.response import Response

logger = logging.getLogger(__name__)


class MondayClientError(Exception):
    """Base exception for monday.com API errors."""

    def __init__(
        self,
        message: Optional[str] = None,
        response: Optional[Response] = None,
        code: Optional[int] = None,
    ):
        self.response = response
        self.message = self._build_message(message)
        self.code = self._build_code(code)
        super().__init__(self.message or "")

    @property
    def error_data(self) -> Dict[str, Any]:
        """Structured context from ``body["error_data"]``, or an empty dict."""
        if self.response is None:
            return {}
        data = self.response.body.get("error_data")
        return data if data is not None else {}

    def _build_message(self, message: Optional[str]) -> Optional[str]:
        response_message = self._response_message()
        if message is None:
            return response_message
        if response_message is None:
            return message
        return f"{message}: {response_message}"

    def _build_code(self, code: Optional[int]) -> Optional[int]:
        if code is not None:
            return code
        if self.response is None:
            return None
        status_code = self.response.body.get("status_code")
        return status_code if status_code is not None else self.response.status

    def _response_message(self) -> Optional[str]:
        if self.response is None:
            return None
        body = self.response.body
        if body.get("error_message") is not None:
            return str(body["error_message"])
        if body.get("errors") is not None:
            return json.dumps(body["errors"], default=str)
        return None


class AuthorizationError(MondayClientError):
    """
    HTTP 401 or 403, or the ``UserUnauthorizedException`` error code.
    """


class InvalidRequestError(MondayClientError):
    """
    HTTP 400, or one of the ``Invalid*Exception`` style error codes
    (InvalidBoardIdException, ColumnValueException, ...).
    """


class ResourceNotFoundError(MondayClientError):
    """HTTP 404, or the ``ResourceNotFoundException`` error code."""


class RateLimitError(MondayClientError):
    """HTTP 429."""


class InternalServerError(MondayClientError):
    """HTTP 500."""


class ComplexityError(MondayClientError):
    """The query exceeded its complexity budget (``ComplexityException``)."""


# ------------------------------------------------------------------
#  Dispatch tables
# ------------------------------------------------------------------

STATUS_CODE_ERRORS: Dict[int, Type[MondayClientError]] = {
    400: InvalidRequestError,
    401: AuthorizationError,
    403: AuthorizationError,
    404: ResourceNotFoundError,
    429: RateLimitError,
    500: InternalServerError,
}

RESPONSE_ERRORS: Dict[str, Tuple[Type[MondayClientError], int]] = {
    "ComplexityException": (ComplexityError, 429),
    "UserUnauthorizedException": (AuthorizationError, 403),
    "ResourceNotFoundException": (ResourceNotFoundError, 404),
    "InvalidUserIdException": (InvalidRequestError, 400),
    "InvalidVersionException": (InvalidRequestError, 400),
    "InvalidColumnIdException": (InvalidRequestError, 400),
    "InvalidItemIdException": (InvalidRequestError, 400),
    "InvalidBoardIdException": (InvalidRequestError, 400),
    "InvalidArgumentException": (InvalidRequestError, 400),
    "InvalidGroupIdException": (InvalidRequestError, 400),
    "CreateBoardException": (InvalidRequestError, 400),
    "ItemsLimitationException": (InvalidRequestError, 400),
    "ItemNameTooLongException": (InvalidRequestError, 400),
    "ColumnValueException": (InvalidRequestError, 400),
    "CorrectedValueException": (InvalidRequestError, 400),
}

DEFAULT_RESPONSE_ERROR: Tuple[Type[MondayClientError], int] = (MondayClientError, 400)

_INVALID_EXCEPTION_RE = re.compile(r"Invalid\w*Exception")


def status_code_error(status: int) -> Type[MondayClientError]:
    """Error class for a non-2XX HTTP status."""
    return STATUS_CODE_ERRORS.get(status, MondayClientError)


def response_error(error_code: str) -> Tuple[Type[MondayClientError], int]:
    """
    Error class and numeric code for a monday.com error code.

    Args:
        error_code: Error code taken from the response body

    Returns:
        Tuple of (error class, numeric code); unknown codes map to the
        generic error with code 400
    """
    if error_code in RESPONSE_ERRORS:
        return RESPONSE_ERRORS[error_code]
    if _INVALID_EXCEPTION_RE.search(error_code):
        return InvalidRequestError, 400
    return DEFAULT_RESPONSE_ERROR


def response_error_code(response: Response) -> Optional[str]:
    """
    Extract the monday.com error code from a response body.

    Looks at ``error_code`` first, then ``extensions.code`` and
    ``extensions.error_code`` of the first GraphQL error.
    """
    error_code = response.body.get("error_code")
    if error_code is not None:
        return str(error_code)

    errors = response.body.get("errors")
    if not isinstance(errors, list) or not errors or not isinstance(errors[0], dict):
        return None

    extensions = errors[0].get("extensions")
    if not isinstance(extensions, dict):
        return None

    error_code = extensions.get("code") or extensions.get("error_code")
    return str(error_code) if error_code is not None else None


def classify(response: Response) -> MondayClientError:
    """
    Build the typed error for an unsuccessful response.

    Non-2XX statuses are mapped by status code. A 2XX response carrying error
    keys in its body is mapped by its monday.com error code.

    Args:
        response: Response whose ``success`` is False

    Returns:
        Error instance, ready to raise
    """
    if not 200 <= response.status <= 299:
        error_class = status_code_error(response.status)
        return error_class(response=response, code=response.status)

    error_code = response_error_code(response)
    if error_code is None:
        return MondayClientError(response=response)

    error_class, code = response_error(error_code)
    logger.debug(f"Mapped error code {error_code} to {error_class.__name__}")
    return error_class(message=error_code, response=response, code=code)
