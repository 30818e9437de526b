"""Outcome type for computations that can fail."""

from dataclasses import dataclass
from typing import TypeVar, Generic

T = TypeVar("T")

@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

@dataclass(frozen=True)
class Failure:
    """A captured exception. Not generic: the error channel is always ``Exception``."""

    error: Exception

    def __post_init__(self) -> None:
        if not isinstance(self.error, Exception):
            raise TypeError(
                f"Failure expects an Exception instance, got {type(self.error).__name__}"
            )

type ResultOutcome[T] = Success[T] | Failure
