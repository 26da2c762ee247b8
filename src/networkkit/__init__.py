from ._codec import Codec, JsonCodec
from ._config import Config
from ._network_kit import NetworkKit
from ._services import FetchClient
from ._utils import Endpoint, QueryValue, Request, build_request, build_url
from ._version import __version__
from .models import (
    BodyEncodingError,
    DecodingErrorCause,
    Failure,
    HttpMethod,
    InvalidEndpointError,
    NetworkError,
    NetworkErrorKind,
    Result,
    Success,
)

__all__ = [
    "BodyEncodingError",
    "Codec",
    "Config",
    "DecodingErrorCause",
    "Endpoint",
    "Failure",
    "FetchClient",
    "HttpMethod",
    "InvalidEndpointError",
    "JsonCodec",
    "NetworkError",
    "NetworkErrorKind",
    "NetworkKit",
    "QueryValue",
    "Request",
    "Result",
    "Success",
    "__version__",
    "build_request",
    "build_url",
]
