import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote

from httpx import URL, InvalidURL

from ..models.errors import InvalidEndpointError
from .constants import URL_SCHEME

logger = logging.getLogger(__name__)

QueryValue = Union[str, int, float, bool, None, List["QueryValue"]]
QueryPair = Tuple[str, str]

# "?" and "#" are escaped, existing percent-escapes are kept
_PATH_SAFE = "/:@!$&'()*+,;=-._~%"


@dataclass(frozen=True)
class Endpoint:
    """Describes where a request goes: a host, a path and its query parameters.

    The scheme is always https. A leading slash is added to ``path``, so
    ``Endpoint(host="api.example.com")`` resolves to ``https://api.example.com/``.

    Query parameter values may be strings, numbers, booleans, None or lists of
    those. None values are dropped and lists become repeated keys.

    Examples:
        ```python
        endpoint = Endpoint(
            host="api.example.com",
            path="v1/users",
            query_parameters={"page": 2, "tag": ["a", "b"], "q": None},
        )
        endpoint.url  # https://api.example.com/v1/users?page=2&tag=a&tag=b
        ```
    """

    host: str
    path: str = ""
    query_parameters: Optional[Mapping[str, QueryValue]] = None

    @property
    def url(self) -> URL:
        return build_url(self)


def build_url(endpoint: Endpoint) -> URL:
    """Resolve an Endpoint into an absolute https URL.

    Args:
        endpoint: The endpoint description.

    Returns:
        URL: The assembled URL. Equal endpoints always give equal URLs.

    Raises:
        InvalidEndpointError: If a field of the endpoint has an impossible type.
        InvalidURL: If the host is empty or httpx refuses the components.
    """
    if not isinstance(endpoint.host, str):
        raise InvalidEndpointError(
            f"Endpoint host must be a string, got {type(endpoint.host).__name__}"
        )
    if not isinstance(endpoint.path, str):
        raise InvalidEndpointError(
            f"Endpoint path must be a string, got {type(endpoint.path).__name__}"
        )
    if not endpoint.host:
        raise InvalidURL("Endpoint host must not be empty")

    return URL(
        scheme=URL_SCHEME,
        host=endpoint.host,
        path=quote("/" + endpoint.path, safe=_PATH_SAFE),
        params=to_query_pairs(endpoint.query_parameters),
    )


def to_query_pairs(
    query_parameters: Optional[Mapping[str, QueryValue]],
) -> List[QueryPair]:
    """Flatten query parameters into ordered (key, value) pairs."""
    if query_parameters is None:
        return []
    if not isinstance(query_parameters, Mapping):
        raise InvalidEndpointError(
            "Endpoint query_parameters must be a mapping, "
            f"got {type(query_parameters).__name__}"
        )

    pairs: List[QueryPair] = []
    for key, value in query_parameters.items():
        if not isinstance(key, str):
            raise InvalidEndpointError(
                f"Query parameter names must be strings, got {key!r}"
            )
        if value is None:
            continue
        pairs.extend(_query_pairs(key, value))
    return pairs


def _query_pairs(key: str, value: Any) -> List[QueryPair]:
    if isinstance(value, (list, tuple)):
        pairs: List[QueryPair] = []
        for item in value:
            # only one level of nesting is flattened
            if item is None or isinstance(item, (list, tuple)):
                continue
            pairs.extend(_query_pairs(key, item))
        return pairs

    scalar = _to_query_string(value)
    if scalar is None:
        logger.warning(
            "Ignoring query parameter '%s' with unsupported type %s",
            key,
            type(value).__name__,
        )
        return []
    return [(key, scalar)]


def _to_query_string(value: Any) -> Optional[str]:
    # plain str, int and float forms so enum members render as their values
    if isinstance(value, str):
        return str.__str__(value)
    # bool first: bool is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return int.__repr__(value)
    if isinstance(value, float):
        return float.__repr__(value)
    return None
