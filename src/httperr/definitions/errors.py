from typing import Any


class DuplicateStatusError(ValueError):
    def __init__(self, status: int):
        self.status = status
        super().__init__(f"HTTP status {status} is already registered")


class DuplicateErrorCodeError(ValueError):
    def __init__(self, error_code: str):
        self.error_code = error_code
        super().__init__(f"Error code {error_code} is already registered")


class InvalidErrorKindError(ValueError):
    def __init__(self, error_code: str, reason: str):
        self.error_code = error_code
        self.reason = reason
        super().__init__(f"Error kind {error_code!r} is invalid: {reason}")


class StatusNormalizationError(TypeError):
    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Cannot normalize {value!r} of type {type(value).__name__} to an HTTP status code")
