"""resultwrap: Wrap fallible computations into Success / Failure values."""

from .result import Failure, ResultOutcome, Success
from .faults import DEFAULT_POLICY, FATAL_ENV_VAR, FaultPolicy
from .combinators import (
    map, map_result, value_or_handle, value_or_none, value_or_raise, wrap
)
from .handlers import log_failure

__all__ = [
    # Outcome
    "Success", "Failure", "ResultOutcome",
    # Fault policy
    "DEFAULT_POLICY", "FATAL_ENV_VAR", "FaultPolicy",
    # Combinators
    "wrap", "map", "map_result", "value_or_none", "value_or_raise", "value_or_handle",
    # Handlers
    "log_failure",
]
