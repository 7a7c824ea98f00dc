from enum import Enum


class StatusClass(str, Enum):
    INFORMATIONAL = "informational"
    SUCCESS = "success"
    REDIRECTION = "redirection"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    UNKNOWN = "unknown"

    @classmethod
    def of(cls, status: int) -> "StatusClass":
        if not 100 <= status <= 599:
            return cls.UNKNOWN
        return _BY_HUNDREDS[status // 100]


_BY_HUNDREDS = {
    1: StatusClass.INFORMATIONAL,
    2: StatusClass.SUCCESS,
    3: StatusClass.REDIRECTION,
    4: StatusClass.CLIENT_ERROR,
    5: StatusClass.SERVER_ERROR,
}
