"""
Outcome - result of an operation that may be rejected for business reasons.

    result = await handler.execute(command)
    if result.is_failure():
        return bad_request(result.reason)
    animal = result.value

Unexpected faults (storage down, I/O errors) are never wrapped in an Outcome;
they propagate as ordinary exceptions.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class OutcomeError(Exception):
    """Raised when reading the value of a Failure."""


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure:
    reason: str

    def is_failure(self) -> bool:
        return True

    @property
    def value(self):
        raise OutcomeError(f"Failure has no value: {self.reason}")


Outcome = Union[Success[T], Failure]
