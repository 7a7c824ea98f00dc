from dataclasses import dataclass

from httperr.definitions.contracts import ContextContract
from httperr.definitions.enums import StatusClass
from httperr.definitions.errors import InvalidErrorKindError
from httperr.patterns.errors import Error, HttpClientError, HttpRedirectionError, HttpServerError

_ERROR_TYPES: dict[StatusClass, type[Error]] = {
    StatusClass.REDIRECTION: HttpRedirectionError,
    StatusClass.CLIENT_ERROR: HttpClientError,
    StatusClass.SERVER_ERROR: HttpServerError,
}


@dataclass(frozen=True, slots=True)
class ErrorKind:
    """
    A registered association between an HTTP status and a stable error code.

    `error_code` is the machine-readable identifier (e.g. ``"HTTP-18430"``) and
    `label` the default human-readable message for errors of this kind.
    """

    error_code: str
    http_status: int
    label: str

    def __post_init__(self) -> None:
        if not self.error_code:
            raise InvalidErrorKindError(self.error_code, "error code is empty")
        if not self.label:
            raise InvalidErrorKindError(self.error_code, "label is empty")
        if isinstance(self.http_status, bool) or not isinstance(self.http_status, int):
            raise InvalidErrorKindError(self.error_code, f"status {self.http_status!r} is not an integer")
        if not 100 <= self.http_status <= 599:
            raise InvalidErrorKindError(self.error_code, f"status {self.http_status} is outside 100..599")

    @property
    def status_class(self) -> StatusClass:
        return StatusClass.of(self.http_status)

    @property
    def error_type(self) -> type[Error]:
        return _ERROR_TYPES.get(self.status_class, Error)

    def to_error(
        self,
        message: str | None = None,
        context: ContextContract | None = None,
        http_status: int | None = None,
    ) -> Error:
        """
        Build an error of this kind.

        `http_status` overrides the kind's own status on the resulting error, which
        is how an unregistered status keeps its original value when it falls back
        to a generic kind.
        """
        return self.error_type(
            code=self.error_code,
            message=self.label if message is None else message,
            http_status=self.http_status if http_status is None else http_status,
            context=dict(context) if context else {},
        )
