from functools import lru_cache
from typing import Any, Protocol, Type, TypeVar

from pydantic import TypeAdapter
from pydantic_core import to_json

from .models.errors import BodyEncodingError

T = TypeVar("T")


class Codec(Protocol):
    """Serializes request bodies and deserializes response payloads."""

    media_type: str

    def encode(self, value: Any) -> bytes: ...

    def decode(self, data: bytes, type_: Type[T]) -> T: ...


@lru_cache(maxsize=256)
def _type_adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


class JsonCodec:
    """JSON codec backed by pydantic.

    Encodes anything pydantic can serialize (models, dataclasses, dicts,
    lists, scalars) and decodes into any type pydantic can validate.
    Holds no state, so one instance can be shared by every client.
    """

    media_type = "application/json"

    def encode(self, value: Any) -> bytes:
        try:
            return to_json(value)
        except ValueError as e:
            raise BodyEncodingError(str(e)) from e

    def decode(self, data: bytes, type_: Type[T]) -> T:
        return _type_adapter(type_).validate_json(data)


DEFAULT_CODEC = JsonCodec()
