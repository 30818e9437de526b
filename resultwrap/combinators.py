"""Construction and combinators for :data:`ResultOutcome`.

``wrap`` is the only place that turns a raised exception into a value.
Callbacks passed to ``map``, ``map_result`` and ``value_or_handle`` are
invoked unguarded: if they raise, the exception propagates to the caller and
is NOT re-wrapped into a ``Failure``.

A ``Failure`` always short-circuits: the combinators hand back the very same
instance and never call the supplied callback.
"""

from collections.abc import Callable
from typing import TypeVar

from resultwrap.faults import DEFAULT_POLICY, FaultPolicy
from resultwrap.result import Failure, ResultOutcome, Success

T = TypeVar("T")
R = TypeVar("R")


def _not_an_outcome(obj: object) -> TypeError:
    return TypeError(f"Expected Success or Failure, got {type(obj).__name__}")


def wrap(block: Callable[[], T], *, policy: FaultPolicy = DEFAULT_POLICY) -> ResultOutcome[T]:
    """Call ``block`` once and capture its return value or recoverable exception.

    Exceptions that ``policy`` classifies as fatal are re-raised untouched.
    """
    try:
        return Success(block())
    except Exception as e:
        if policy.is_fatal(e):
            raise
        return Failure(e)


def map(outcome: ResultOutcome[T], transform: Callable[[T], R]) -> ResultOutcome[R]:
    """Apply ``transform`` to a success value; pass a failure through unchanged."""
    match outcome:
        case Success(value):
            return Success(transform(value))
        case Failure():
            return outcome
        case _:
            raise _not_an_outcome(outcome)


def map_result(
    outcome: ResultOutcome[T], transform: Callable[[T], ResultOutcome[R]]
) -> ResultOutcome[R]:
    """Chain a step that itself returns an outcome, without nesting."""
    match outcome:
        case Success(value):
            return transform(value)
        case Failure():
            return outcome
        case _:
            raise _not_an_outcome(outcome)


def value_or_none(outcome: ResultOutcome[T]) -> T | None:
    match outcome:
        case Success(value):
            return value
        case Failure():
            return None
        case _:
            raise _not_an_outcome(outcome)


def value_or_raise(outcome: ResultOutcome[T]) -> T:
    """Return the success value, or re-raise the captured exception itself.

    The exception object is shared with the ``Failure``. Raising it inside an
    ``except`` block sets its ``__context__`` to the exception being handled,
    and the traceback grows with each re-raise, so later calls see those
    attributes changed. Identity and type stay the same.
    """
    match outcome:
        case Success(value):
            return value
        case Failure(error):
            raise error
        case _:
            raise _not_an_outcome(outcome)


def value_or_handle(
    outcome: ResultOutcome[T], on_error: Callable[[Exception], object]
) -> T | None:
    """Return the success value, or call ``on_error`` with the exception and return None.

    Whatever ``on_error`` returns is discarded.
    """
    match outcome:
        case Success(value):
            return value
        case Failure(error):
            on_error(error)
            return None
        case _:
            raise _not_an_outcome(outcome)
