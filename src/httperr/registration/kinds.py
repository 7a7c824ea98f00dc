"""
Error kinds for the HTTP statuses supported out of the box.

Grouped by the standard HTTP categories: 3xx redirection, 4xx client errors
and 5xx server errors. Error codes are stable and must never be reassigned.
"""

from .entities import ErrorKind

# Redirection (3xx)
MULTIPLE_CHOICES = ErrorKind("HTTP-11298", 300, "Multiple Choices")
MOVED_PERMANENTLY = ErrorKind("HTTP-23108", 301, "Moved Permanently")
FOUND = ErrorKind("HTTP-07132", 302, "Found")
SEE_OTHER = ErrorKind("HTTP-16746", 303, "See Other")
NOT_MODIFIED = ErrorKind("HTTP-21556", 304, "Not Modified")
USE_PROXY = ErrorKind("HTTP-31839", 305, "Use Proxy")
TEMPORARY_REDIRECT = ErrorKind("HTTP-25446", 307, "Temporary Redirect")
PERMANENT_REDIRECT = ErrorKind("HTTP-12280", 308, "Permanent Redirect")

# Client errors (4xx)
BAD_REQUEST = ErrorKind("HTTP-26760", 400, "Bad Request")
UNAUTHORIZED = ErrorKind("HTTP-08059", 401, "Unauthorized")
PAYMENT_REQUIRED = ErrorKind("HTTP-18076", 402, "Payment Required")
FORBIDDEN = ErrorKind("HTTP-23134", 403, "Forbidden")
NOT_FOUND = ErrorKind("HTTP-18430", 404, "Not Found")
METHOD_NOT_ALLOWED = ErrorKind("HTTP-23585", 405, "Method Not Allowed")
NOT_ACCEPTABLE = ErrorKind("HTTP-04289", 406, "Not Acceptable")
PROXY_AUTHENTICATION_REQUIRED = ErrorKind("HTTP-17336", 407, "Proxy Authentication Required")
REQUEST_TIMEOUT = ErrorKind("HTTP-00565", 408, "Request Timeout")
CONFLICT = ErrorKind("HTTP-08442", 409, "Conflict")
GONE = ErrorKind("HTTP-19916", 410, "Gone")
LENGTH_REQUIRED = ErrorKind("HTTP-09400", 411, "Length Required")
PRECONDITION_FAILED = ErrorKind("HTTP-22509", 412, "Precondition Failed")
PAYLOAD_TOO_LARGE = ErrorKind("HTTP-10591", 413, "Payload Too Large")
URI_TOO_LONG = ErrorKind("HTTP-01377", 414, "URI Too Long")
UNSUPPORTED_MEDIA_TYPE = ErrorKind("HTTP-12512", 415, "Unsupported Media Type")
RANGE_NOT_SATISFIABLE = ErrorKind("HTTP-21696", 416, "Range Not Satisfiable")
EXPECTATION_FAILED = ErrorKind("HTTP-16872", 417, "Expectation Failed")
IM_A_TEAPOT = ErrorKind("HTTP-23719", 418, "I'm a teapot")
MISDIRECTED_REQUEST = ErrorKind("HTTP-26981", 421, "Misdirected Request")
UNPROCESSABLE_ENTITY = ErrorKind("HTTP-12568", 422, "Unprocessable Entity")
LOCKED = ErrorKind("HTTP-32695", 423, "Locked")
FAILED_DEPENDENCY = ErrorKind("HTTP-19693", 424, "Failed Dependency")
UPGRADE_REQUIRED = ErrorKind("HTTP-22991", 426, "Upgrade Required")
PRECONDITION_REQUIRED = ErrorKind("HTTP-02452", 428, "Precondition Required")
TOO_MANY_REQUESTS = ErrorKind("HTTP-12176", 429, "Too Many Requests")
REQUEST_HEADER_FIELDS_TOO_LARGE = ErrorKind("HTTP-07756", 431, "Request Header Fields Too Large")
UNAVAILABLE_FOR_LEGAL_REASONS = ErrorKind("HTTP-12136", 451, "Unavailable For Legal Reasons")

# Server errors (5xx)
INTERNAL_SERVER_ERROR = ErrorKind("HTTP-09069", 500, "Internal Server Error")
NOT_IMPLEMENTED = ErrorKind("HTTP-03394", 501, "Not Implemented")
BAD_GATEWAY = ErrorKind("HTTP-19734", 502, "Bad Gateway")
SERVICE_UNAVAILABLE = ErrorKind("HTTP-18979", 503, "Service Unavailable")
GATEWAY_TIMEOUT = ErrorKind("HTTP-17595", 504, "Gateway Timeout")
HTTP_VERSION_NOT_SUPPORTED = ErrorKind("HTTP-01625", 505, "HTTP Version Not Supported")
VARIANT_ALSO_NEGOTIATES = ErrorKind("HTTP-28382", 506, "Variant Also Negotiates")
INSUFFICIENT_STORAGE = ErrorKind("HTTP-32132", 507, "Insufficient Storage")
LOOP_DETECTED = ErrorKind("HTTP-30770", 508, "Loop Detected")
NOT_EXTENDED = ErrorKind("HTTP-19347", 510, "Not Extended")
NETWORK_AUTHENTICATION_REQUIRED = ErrorKind("HTTP-31948", 511, "Network Authentication Required")

# Used for every status without an entry of its own
FALLBACK_KIND = INTERNAL_SERVER_ERROR

DEFAULT_KINDS: tuple[ErrorKind, ...] = (
    MULTIPLE_CHOICES,
    MOVED_PERMANENTLY,
    FOUND,
    SEE_OTHER,
    NOT_MODIFIED,
    USE_PROXY,
    TEMPORARY_REDIRECT,
    PERMANENT_REDIRECT,
    BAD_REQUEST,
    UNAUTHORIZED,
    PAYMENT_REQUIRED,
    FORBIDDEN,
    NOT_FOUND,
    METHOD_NOT_ALLOWED,
    NOT_ACCEPTABLE,
    PROXY_AUTHENTICATION_REQUIRED,
    REQUEST_TIMEOUT,
    CONFLICT,
    GONE,
    LENGTH_REQUIRED,
    PRECONDITION_FAILED,
    PAYLOAD_TOO_LARGE,
    URI_TOO_LONG,
    UNSUPPORTED_MEDIA_TYPE,
    RANGE_NOT_SATISFIABLE,
    EXPECTATION_FAILED,
    IM_A_TEAPOT,
    MISDIRECTED_REQUEST,
    UNPROCESSABLE_ENTITY,
    LOCKED,
    FAILED_DEPENDENCY,
    UPGRADE_REQUIRED,
    PRECONDITION_REQUIRED,
    TOO_MANY_REQUESTS,
    REQUEST_HEADER_FIELDS_TOO_LARGE,
    UNAVAILABLE_FOR_LEGAL_REASONS,
    INTERNAL_SERVER_ERROR,
    NOT_IMPLEMENTED,
    BAD_GATEWAY,
    SERVICE_UNAVAILABLE,
    GATEWAY_TIMEOUT,
    HTTP_VERSION_NOT_SUPPORTED,
    VARIANT_ALSO_NEGOTIATES,
    INSUFFICIENT_STORAGE,
    LOOP_DETECTED,
    NOT_EXTENDED,
    NETWORK_AUTHENTICATION_REQUIRED,
)
