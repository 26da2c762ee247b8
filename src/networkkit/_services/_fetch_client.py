from logging import getLogger
from types import TracebackType
from typing import Any, Dict, Optional, Type, TypeVar, Union

from httpx import AsyncClient, Client, Response
from httpx import Request as WireRequest

from .._codec import DEFAULT_CODEC, Codec
from .._config import Config
from .._utils import (
    Request,
    build_request,
    classify_exception,
    get_httpx_client_kwargs,
    handle_decoding_error,
)
from .._utils.constants import HEADER_USER_AGENT, LOGGER_NAME
from ..models.errors import (
    BodyEncodingError,
    InvalidEndpointError,
    NetworkError,
    NetworkErrorKind,
)
from ..models.result import Failure, Result, Success

T = TypeVar("T")


class FetchClient:
    """Executes Request descriptions and maps the outcome to a Result.

    Every call is a single round trip through the HTTP engine: no retries,
    no caching. Failures never raise; they come back as ``Failure`` holding
    a NetworkError. The only exception that escapes is InvalidEndpointError,
    which signals an endpoint that could not even be represented.

    The client keeps no per-call state and can be shared across tasks.

    Examples:
        ```python
        from pydantic import BaseModel
        from networkkit import Endpoint, FetchClient, Request

        class User(BaseModel):
            id: int
            name: str

        async with FetchClient() as client:
            result = await client.fetch(
                Request(endpoint=Endpoint(host="api.example.com", path="users/1")),
                User,
            )
            if result.is_success:
                print(result.value.name)
            else:
                print(result.error.kind, result.error.message)
        ```
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        *,
        codec: Optional[Codec] = None,
        client: Optional[Client] = None,
        client_async: Optional[AsyncClient] = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config or Config()
        self._codec = codec or DEFAULT_CODEC

        client_kwargs = get_httpx_client_kwargs(
            verify_ssl=self._config.verify_ssl,
            follow_redirects=self._config.follow_redirects,
        )

        self._owns_client = client is None
        self._owns_client_async = client_async is None
        self._client = client or Client(**client_kwargs)
        self._client_async = client_async or AsyncClient(**client_kwargs)

        self._logger.debug(f"HEADERS: {self.default_headers}")

    @property
    def default_headers(self) -> Dict[str, str]:
        return {
            HEADER_USER_AGENT: self._config.user_agent,
            **self._config.default_headers,
        }

    async def fetch(self, request: Request, response_type: Type[T]) -> Result[T]:
        """Send a request and decode the response into ``response_type``.

        Args:
            request: The call description.
            response_type: Any type the codec can decode into (pydantic models,
                dataclasses, builtins, generics such as ``list[User]``).

        Returns:
            Result[T]: ``Success`` with the decoded value, or ``Failure``.

        Raises:
            InvalidEndpointError: If the request's endpoint is structurally invalid.
        """
        prepared = self._prepare(request)
        if isinstance(prepared, Failure):
            return prepared

        try:
            response = await self._client_async.send(prepared)
        except Exception as e:
            return self._fail(classify_exception(e))

        return self._handle_response(response, response_type)

    def fetch_sync(self, request: Request, response_type: Type[T]) -> Result[T]:
        """Blocking variant of :meth:`fetch`."""
        prepared = self._prepare(request)
        if isinstance(prepared, Failure):
            return prepared

        try:
            response = self._client.send(prepared)
        except Exception as e:
            return self._fail(classify_exception(e))

        return self._handle_response(response, response_type)

    def _prepare(self, request: Request) -> Union[WireRequest, Failure]:
        try:
            wire_request = build_request(
                request, codec=self._codec, default_headers=self.default_headers
            )
        except InvalidEndpointError:
            raise
        except BodyEncodingError as e:
            self._logger.debug(f"Body encoding failed: {e.message}")
            return self._fail(
                NetworkError(NetworkErrorKind.BAD_REQUEST, "Invalid Body")
            )
        except Exception as e:
            return self._fail(classify_exception(e))

        if wire_request is None:
            return self._fail(NetworkError(NetworkErrorKind.NOT_FOUND, "Invalid URL"))

        self._logger.debug(f"Request: {wire_request.method} {wire_request.url}")
        return wire_request

    def _handle_response(self, response: Any, response_type: Type[T]) -> Result[T]:
        if not isinstance(response, Response):
            return self._fail(NetworkError.of(NetworkErrorKind.BAD_REQUEST))

        self._logger.debug(f"Response: {response.status_code} {response.url}")

        if not response.is_success:
            kind = NetworkErrorKind.from_status_code(response.status_code)
            return self._fail(NetworkError.of(kind))

        try:
            value = self._codec.decode(response.content, response_type)
        except ValueError as e:
            return self._fail(handle_decoding_error(e))
        except Exception as e:
            return self._fail(classify_exception(e))

        return Success(value)

    def _fail(self, error: NetworkError) -> Failure:
        self._logger.debug(f"Request failed: {error.kind.name} {error.message}")
        return Failure(error)

    def close(self) -> None:
        """Close the owned sync engine. Use aclose() to release both engines."""
        if self._owns_client:
            self._client.close()

    async def aclose(self) -> None:
        """Close every engine this client built, sync and async."""
        if self._owns_client_async:
            await self._client_async.aclose()
        self.close()

    def __enter__(self) -> "FetchClient":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()

    async def __aenter__(self) -> "FetchClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        await self.aclose()
