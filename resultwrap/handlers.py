"""Ready-made ``on_error`` callbacks for :func:`resultwrap.value_or_handle`."""

from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


def log_failure(
    target: logging.Logger | None = None,
    level: int = logging.ERROR,
    message: str = "Captured failure: %s",
) -> Callable[[Exception], None]:
    """Return a callback that logs the exception, traceback included.

    ``message`` is a %-style format string receiving the exception as its only
    argument. Logs to this module's logger unless ``target`` is given.
    """
    log = target if target is not None else logger

    def _handle(error: Exception) -> None:
        log.log(level, message, error, exc_info=error)

    return _handle
