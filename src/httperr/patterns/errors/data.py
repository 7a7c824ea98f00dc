from dataclasses import dataclass

from .generic import Error


# Built from a concrete ErrorKind only, never with defaults


@dataclass(frozen=True, kw_only=True, slots=True)
class HttpRedirectionError(Error):
    code: str
    message: str
    http_status: int


@dataclass(frozen=True, kw_only=True, slots=True)
class HttpClientError(Error):
    code: str
    message: str
    http_status: int


@dataclass(frozen=True, kw_only=True, slots=True)
class HttpServerError(Error):
    code: str
    message: str
    http_status: int
