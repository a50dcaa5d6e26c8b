"""Result type: every public operation returns ``Ok`` or ``Err``, never raises."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeGuard, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying ``error``."""

    error: E

    @property
    def success(self) -> bool:
        return False


Result = Union[Ok[T], Err[E]]


def is_error(result: Result[T, E]) -> TypeGuard[Err[E]]:
    """True when ``result`` is the failure variant."""
    return isinstance(result, Err)
