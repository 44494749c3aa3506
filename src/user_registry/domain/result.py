from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .errors import NotFound, UserNotFoundError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: NotFound

    def unwrap(self):
        raise UserNotFoundError(self.error.id)


Result = Union[Ok[T], Err]
