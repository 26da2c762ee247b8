from .errors import (
    BodyEncodingError,
    DecodingErrorCause,
    InvalidEndpointError,
    NetworkError,
    NetworkErrorKind,
)
from .http import HttpMethod
from .result import Failure, Result, Success

__all__ = [
    "BodyEncodingError",
    "DecodingErrorCause",
    "Failure",
    "HttpMethod",
    "InvalidEndpointError",
    "NetworkError",
    "NetworkErrorKind",
    "Result",
    "Success",
]
