from enum import Enum
from typing import Optional

_REASONS: dict[str, str] = {
    "BAD_REQUEST": "Bad Request",
    "UNAUTHORIZED": "Unauthorized",
    "FORBIDDEN": "Forbidden",
    "NOT_FOUND": "Not Found",
    "METHOD_NOT_ALLOWED": "Method Not Allowed",
    "NOT_ACCEPTABLE": "Not Acceptable",
    "REQUEST_TIMEOUT": "Request Timeout",
    "NO_RESPONSE": "No Response",
    "INTERNAL_SERVER_ERROR": "Internal Server Error",
    "NOT_IMPLEMENTED": "Not Implemented",
    "BAD_GATEWAY": "Bad Gateway",
    "SERVICE_UNAVAILABLE": "Service Unavailable",
    "GATEWAY_TIMEOUT": "Gateway Timeout",
    "HTTP_VERSION_NOT_SUPPORTED": "HTTP Version Not Supported",
    "VARIANT_ALSO_NEGOTIATES": "Variant Also Negotiates",
    "INSUFFICIENT_STORAGE": "Insufficient Storage",
    "LOOP_DETECTED": "Loop Detected",
    "NOT_EXTENDED": "Not Extended",
    "NETWORK_AUTHENTICATION_REQUIRED": "Network Authentication Required",
    "DECODING_FAILED": "Decoding Failed",
    "UNKNOWN": "Unknown Error",
}


class NetworkErrorKind(Enum):
    """Closed classification of the ways a fetch can fail.

    Status-derived members carry their HTTP status code as value. The two
    members that do not come from a response status carry a string value.
    """

    # The server cannot or will not process the request due to a client error.
    BAD_REQUEST = 400
    # Authentication is required and has failed or has not been provided.
    UNAUTHORIZED = 401
    # The request was valid but the server refuses to respond to it.
    FORBIDDEN = 403
    # The requested resource could not be found.
    NOT_FOUND = 404
    # The method is not supported for the requested resource.
    METHOD_NOT_ALLOWED = 405
    # Only content not acceptable according to the Accept headers is available.
    NOT_ACCEPTABLE = 406
    # The server timed out waiting for the request.
    REQUEST_TIMEOUT = 408
    # The server returned no information and closed the connection.
    NO_RESPONSE = 444
    # Generic server-side failure.
    INTERNAL_SERVER_ERROR = 500
    # The server does not recognize the method or cannot fulfil it.
    NOT_IMPLEMENTED = 501
    # A gateway or proxy got an invalid response from upstream.
    BAD_GATEWAY = 502
    # The server is overloaded or down for maintenance.
    SERVICE_UNAVAILABLE = 503
    # A gateway or proxy did not get a timely response from upstream.
    GATEWAY_TIMEOUT = 504
    # The HTTP version used in the request is not supported.
    HTTP_VERSION_NOT_SUPPORTED = 505
    # Transparent content negotiation results in a circular reference.
    VARIANT_ALSO_NEGOTIATES = 506
    # The server cannot store the representation needed to complete the request.
    INSUFFICIENT_STORAGE = 507
    # The server detected an infinite loop while processing the request.
    LOOP_DETECTED = 508
    # Further extensions to the request are required.
    NOT_EXTENDED = 510
    # The client needs to authenticate to gain network access.
    NETWORK_AUTHENTICATION_REQUIRED = 511

    DECODING_FAILED = "decoding_failed"
    UNKNOWN = "unknown"

    @property
    def status_code(self) -> Optional[int]:
        """The HTTP status this kind stands for, or None for non-HTTP kinds."""
        return self.value if isinstance(self.value, int) else None

    @property
    def reason(self) -> str:
        return _REASONS[self.name]

    @classmethod
    def from_status_code(cls, status_code: int) -> "NetworkErrorKind":
        """Map a non-success HTTP status onto the taxonomy.

        Codes without a dedicated member collapse to NO_RESPONSE.
        """
        try:
            return cls(status_code)
        except ValueError:
            return cls.NO_RESPONSE


class DecodingErrorCause(str, Enum):
    """Why a payload could not be decoded. Used for diagnostics only."""

    TYPE_MISMATCH = "type_mismatch"
    VALUE_NOT_FOUND = "value_not_found"
    KEY_NOT_FOUND = "key_not_found"
    DATA_CORRUPTED = "data_corrupted"
    OTHER = "other"


class NetworkError(Exception):
    """The error value every failed fetch resolves to.

    Instances are immutable and compare equal when kind and message match.
    """

    def __init__(self, kind: NetworkErrorKind, message: str) -> None:
        super().__init__(message)
        self._kind = kind
        self._message = message

    @classmethod
    def of(cls, kind: NetworkErrorKind) -> "NetworkError":
        """Build an error whose message is the kind's reason phrase."""
        return cls(kind, kind.reason)

    @property
    def kind(self) -> NetworkErrorKind:
        return self._kind

    @property
    def message(self) -> str:
        return self._message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NetworkError):
            return NotImplemented
        return (self.kind, self.message) == (other.kind, other.message)

    def __hash__(self) -> int:
        return hash((self.kind, self.message))

    def __repr__(self) -> str:
        return f"NetworkError(kind={self.kind.name}, message={self.message!r})"


class InvalidEndpointError(TypeError):
    """Raised when an Endpoint is structurally impossible to turn into a URL.

    This is a programming error and is never converted into a NetworkError.
    """


class BodyEncodingError(ValueError):
    """Raised when a request body cannot be serialized by the codec."""

    def __init__(self, message: str = "Request body could not be encoded") -> None:
        self.message = message
        super().__init__(self.message)
