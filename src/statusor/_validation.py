"""Internal argument-check helpers shared by the container and status types.

Centralizes precondition checks so the error types and messages stay
consistent across modules.
"""

from __future__ import annotations

import logging

from statusor.errors import InvalidArgumentError, StatusOrError

logger = logging.getLogger(__name__)


def _require(
    *,
    condition: bool,
    message: str,
    exc: type[Exception] = InvalidArgumentError,
    field_name: str | None = None,
    hint: str | None = None,
) -> None:
    """Centralized validation with optional field context for clearer errors.

    Library errors carry *hint*; builtin exception types get the message only.
    """
    if condition:
        return
    if field_name:
        message = f"{field_name}: {message}"
    logger.debug("Rejected argument: %s", message)
    if issubclass(exc, StatusOrError):
        raise exc(message, hint=hint)
    raise exc(message)
