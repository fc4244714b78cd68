"""Explicit success-or-error values for encoder lookups.

Lookups that can miss (a row id out of range, a timestamp with no run)
return ``Ok(value)`` or ``Err(error)`` instead of raising, so a miss has to be
handled at the call site:

    result = encoder.reconstruct_row(7)
    if result.ok:
        row = result.value
    else:
        print(result.error)        # "row with id 7 does not exist"

Callers that prefer exceptions can call ``result.unwrap()``, which raises
``EncoderLookupError`` for an ``Err``.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class RowNotFound:
    """Row id outside the valid ``[1, n_rows]`` range."""
    row_id: int
    n_rows: int

    def __str__(self) -> str:
        return f"row with id {self.row_id} does not exist"


@dataclass(frozen=True)
class KeyNotFound:
    """Timestamp absent from the run index."""
    key: Any

    def __str__(self) -> str:
        return f"ts {self.key} not found"


class EncoderLookupError(LookupError):
    """Raised by ``Err.unwrap()``; carries the error value."""

    def __init__(self, error):
        super().__init__(str(error))
        self.error = error


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        raise EncoderLookupError(self.error)


Result = Union[Ok[T], Err[E]]
