"""statusor: return a value or the status explaining its absence.

Public API:
    - StatusOr: The container, built with from_result() / from_status()
    - Ok, Err: Its two variants, for pattern matching
    - Status, Code: A canonical status type to carry in Err
    - settings_scope(): Scoped settings (e.g. strict accessors)

Example:
    result = StatusOr.from_status(Status.NOT_FOUND.with_description("no such user"))
    match result:
        case Ok(user):
            greet(user)
        case Err(status):
            log_failure(status)
"""

from __future__ import annotations

import logging

from statusor.config import Settings, current_settings, settings_scope
from statusor.errors import (
    ConfigurationError,
    InvalidArgumentError,
    StatusOrError,
    VariantAccessError,
)
from statusor.status import Code, Status, StatusLike
from statusor.status_or import Err, Ok, StatusOr

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("statusor")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("statusor").addHandler(logging.NullHandler())

__all__ = [
    "Code",
    "ConfigurationError",
    "Err",
    "InvalidArgumentError",
    "Ok",
    "Settings",
    "Status",
    "StatusLike",
    "StatusOr",
    "StatusOrError",
    "VariantAccessError",
    "current_settings",
    "settings_scope",
]
