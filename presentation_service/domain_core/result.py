"""
Tagged result type returned by every core operation.
"""

import functools
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories a caller can branch on."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    DUPLICATE_TITLE = "DUPLICATE_TITLE"
    NOT_FOUND = "NOT_FOUND"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"
    STORAGE_ERROR = "STORAGE_ERROR"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    detail: str

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]


def returns_result(
    func: Callable[..., Awaitable[Any]],
) -> Callable[..., Awaitable[Result]]:
    """Wrap an async operation so domain errors come back as Err values.

    Exceptions that are not DomainError subclasses are left to propagate.
    """
    from presentation_service.domain_core.errors import DomainError

    @functools.wraps(func)
    async def wrapper(*args, **kwargs) -> Result:
        try:
            value = await func(*args, **kwargs)
        except DomainError as exc:
            return Err(kind=exc.kind, detail=exc.message)
        return Ok(value)

    return wrapper
