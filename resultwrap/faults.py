"""Recoverable vs fatal classification used by :func:`resultwrap.wrap`.

Only ``Exception`` subclasses are ever captured. ``BaseException``-only
signals (``KeyboardInterrupt``, ``SystemExit``, ``GeneratorExit``,
``asyncio.CancelledError``) never reach the policy and always propagate.

On top of that, a :class:`FaultPolicy` holds a denylist of ``Exception``
subclasses that signal a broken program state rather than an expected
failure. The default denylist is:

- ``MemoryError``: exhausted resource.
- ``RecursionError``: stack overflow.
- ``AssertionError``: invariant violation.

Extra fatal types can be added in code with :meth:`FaultPolicy.extend`, or
from the environment with :meth:`FaultPolicy.from_env`.
"""

from __future__ import annotations

import importlib
import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from resultwrap.result import Failure, ResultOutcome, Success

logger = logging.getLogger(__name__)

FATAL_ENV_VAR = "RESULTWRAP_FATAL"

_MISSING = object()


@dataclass(frozen=True)
class FaultPolicy:
    """Denylist of exception types that must cross ``wrap`` uncaught."""

    fatal: tuple[type[BaseException], ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.fatal, tuple):
            raise TypeError(f"fatal must be a tuple, got {type(self.fatal).__name__}")
        for t in self.fatal:
            if not (isinstance(t, type) and issubclass(t, BaseException)):
                raise TypeError(f"fatal entries must be exception classes, got {t!r}")

    def is_fatal(self, exc: BaseException) -> bool:
        if not isinstance(exc, Exception):
            return True
        return isinstance(exc, self.fatal)

    def extend(self, *types: type[BaseException]) -> FaultPolicy:
        """Return a new policy that also treats ``types`` as fatal."""
        added = tuple(t for t in types if t not in self.fatal)
        return FaultPolicy(fatal=self.fatal + added)

    @classmethod
    def from_env(cls, var: str = FATAL_ENV_VAR) -> ResultOutcome[FaultPolicy]:
        """Build a policy from a comma-separated list of dotted exception paths.

        Loads ``.env`` from the working directory or its parents first. An
        unset or blank variable yields :data:`DEFAULT_POLICY`; every listed
        type is added on top of it.
        """
        load_dotenv(find_dotenv(usecwd=True))
        raw = os.getenv(var)

        match raw:
            case str(text) if text.strip():
                entries = [e.strip() for e in text.split(",") if e.strip()]
            case _:
                return Success(DEFAULT_POLICY)

        resolved: list[type[BaseException]] = []
        for entry in entries:
            match _resolve_exception_type(entry):
                case Success(exc_type):
                    resolved.append(exc_type)
                case Failure(e):
                    logger.warning("Cannot use %r from %s: %s", entry, var, e)
                    return Failure(ValueError(f"{var}: {e}"))

        policy = DEFAULT_POLICY.extend(*resolved)
        logger.debug(
            "Fault policy from %s: %s", var, [t.__qualname__ for t in policy.fatal]
        )
        return Success(policy)


def _resolve_exception_type(path: str) -> ResultOutcome[type[BaseException]]:
    if path.startswith(".") or path.endswith("."):
        return Failure(ValueError(f"{path!r} is not an absolute dotted path"))

    module_name, _, attr = path.rpartition(".")
    if not module_name:
        module_name, attr = "builtins", path

    try:
        module = importlib.import_module(module_name)
    except (ImportError, TypeError, ValueError) as e:
        return Failure(ValueError(f"cannot import module {module_name!r} for {path!r}: {e}"))

    obj = getattr(module, attr, _MISSING)
    match obj:
        case type() if issubclass(obj, BaseException):
            return Success(obj)
        case _ if obj is _MISSING:
            return Failure(ValueError(f"{module_name!r} has no attribute {attr!r}"))
        case _:
            return Failure(ValueError(f"{path!r} is not an exception class"))


DEFAULT_POLICY = FaultPolicy(fatal=(MemoryError, RecursionError, AssertionError))
