"""
HTTP status to error conversion.

Conversion has no side effects beyond DEBUG records on the module logger; the
library never attaches handlers of its own.
"""

import logging
import operator

from httperr.definitions.contracts import ContextContract, StatusLike
from httperr.definitions.errors import StatusNormalizationError
from httperr.patterns.errors import Error
from httperr.registration import DEFAULT_REGISTRY, FALLBACK_KIND, ErrorKind, StatusRegistry

logger = logging.getLogger(__name__)


def normalize_status(status: StatusLike) -> int:
    # bool is an int subclass but never a status code
    if isinstance(status, bool):
        raise StatusNormalizationError(status)
    try:
        return operator.index(status)
    except TypeError:
        raise StatusNormalizationError(status) from None


class HTTPErrorConverter:
    """
    Converts HTTP status codes into structured errors.

    Registered statuses produce an error of their own kind; any other integer
    produces an error of the fallback kind that still carries the original
    status. Conversion never fails for an integer input.
    """

    def __init__(
        self,
        registry: StatusRegistry = DEFAULT_REGISTRY,
        fallback: ErrorKind = FALLBACK_KIND,
    ) -> None:
        self._registry = registry
        self._fallback = fallback

    @property
    def registry(self) -> StatusRegistry:
        return self._registry

    @property
    def fallback(self) -> ErrorKind:
        return self._fallback

    def is_known(self, status: StatusLike) -> bool:
        return normalize_status(status) in self._registry

    def from_int(
        self,
        status: int,
        message: str | None = None,
        context: ContextContract | None = None,
    ) -> Error:
        """
        Build the error for a raw integer status.

        :param status: HTTP status code, registered or not; any object supporting
            ``__index__`` (e.g. ``numpy.int64``) is accepted
        :param message: overrides the kind's label when given
        :param context: structured metadata copied into the error as-is
        """
        return self._convert(normalize_status(status), message, context)

    def from_status(
        self,
        status: StatusLike,
        message: str | None = None,
        context: ContextContract | None = None,
    ) -> Error:
        """Build the error for a raw or typed (``http.HTTPStatus``) status."""
        return self._convert(normalize_status(status), message, context)

    def _convert(self, status: int, message: str | None, context: ContextContract | None) -> Error:
        kind = self._registry.lookup(status)
        if kind is None:
            logger.debug("HTTP status %d is not registered, falling back to %s", status, self._fallback.error_code)
            kind = self._fallback
        return kind.to_error(message=message, context=context, http_status=status)


default_converter = HTTPErrorConverter()


def from_int(status: int, message: str | None = None, context: ContextContract | None = None) -> Error:
    return default_converter.from_int(status, message, context)


def from_status(status: StatusLike, message: str | None = None, context: ContextContract | None = None) -> Error:
    return default_converter.from_status(status, message, context)
