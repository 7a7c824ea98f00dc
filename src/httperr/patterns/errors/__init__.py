from .data import HttpClientError, HttpRedirectionError, HttpServerError
from .generic import Error

__all__ = [
    "Error",
    "HttpRedirectionError",
    "HttpClientError",
    "HttpServerError",
]
