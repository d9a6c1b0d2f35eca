"""Exception hierarchy for statusor."""

from __future__ import annotations


class StatusOrError(Exception):
    """Base exception for all statusor errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class InvalidArgumentError(StatusOrError, ValueError):
    """A precondition on a constructor argument was violated.

    This is a programmer error: fix the call site rather than catching it.
    """


class VariantAccessError(StatusOrError, LookupError):
    """The accessor for the other variant was called under strict accessors."""

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        accessor: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.accessor = accessor


class ConfigurationError(StatusOrError):
    """Settings validation failed."""
