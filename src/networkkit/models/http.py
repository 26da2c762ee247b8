from enum import Enum


class HttpMethod(str, Enum):
    """HTTP methods a Request may use."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
