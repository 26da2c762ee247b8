from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from .errors import NetworkError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A fetch that produced a decoded value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """A fetch that ended in a classified NetworkError."""

    error: NetworkError

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Union[Success[T], Failure]
