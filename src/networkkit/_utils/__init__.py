from ._endpoint import Endpoint, QueryValue, build_url
from ._errors import classify_exception, handle_decoding_error
from ._logs import setup_logging
from ._request_spec import Request, build_request
from ._ssl_context import get_httpx_client_kwargs

__all__ = [
    "Endpoint",
    "QueryValue",
    "Request",
    "build_request",
    "build_url",
    "classify_exception",
    "get_httpx_client_kwargs",
    "handle_decoding_error",
    "setup_logging",
]
