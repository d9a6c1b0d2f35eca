"""Settings: a validated, immutable settings model with a scoped override.

Settings are resolved in two layers only:
- defaults declared on the ``Settings`` schema;
- the innermost active ``settings_scope``.

There is no environment or file loading; callers opt in explicitly.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, StrictBool, ValidationError

from statusor.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """Pydantic schema for statusor settings.

    Single source of truth for setting names, types and defaults. Instances
    are frozen and reject unknown keys.
    """

    #: Raise ``VariantAccessError`` instead of returning ``None`` when the
    #: accessor of the other variant is called.
    strict_accessors: StrictBool = Field(default=False)

    model_config = {"frozen": True, "extra": "forbid"}


_DEFAULT_SETTINGS = Settings()

_AMBIENT: contextvars.ContextVar[Settings | None] = contextvars.ContextVar(
    "statusor_settings", default=None
)


def current_settings() -> Settings:
    """Return the settings active in the current context."""
    ambient = _AMBIENT.get()
    return _DEFAULT_SETTINGS if ambient is None else ambient


def _build_settings(base: Settings, overrides: Mapping[str, Any]) -> Settings:
    """Validate *overrides* layered over *base* into a new ``Settings``."""
    try:
        return Settings.model_validate({**base.model_dump(), **overrides})
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) for err in e.errors()
        )
        raise ConfigurationError(
            f"Invalid settings: {fields}",
            hint=f"Valid keys: {', '.join(sorted(Settings.model_fields))}",
        ) from e


@contextmanager
def settings_scope(
    settings: Settings | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Generator[Settings]:
    """Activate settings for the duration of a ``with`` block.

    Thread-safe and async-safe: the active settings live in a context
    variable, and the previous value is restored on exit.

    Args:
        settings: A ``Settings`` instance to use as-is, or a mapping of
            overrides applied on top of the currently active settings.
        **overrides: Additional overrides, merged after *settings*.

    Yields:
        The ``Settings`` instance active inside the block.

    Example:
        with settings_scope(strict_accessors=True):
            StatusOr.from_result("x").get_status()  # raises VariantAccessError
    """
    if isinstance(settings, Settings):
        resolved = _build_settings(settings, overrides) if overrides else settings
    else:
        resolved = _build_settings(current_settings(), {**(settings or {}), **overrides})

    token = _AMBIENT.set(resolved)
    logger.debug("Entered settings scope: %s", resolved)
    try:
        yield resolved
    finally:
        _AMBIENT.reset(token)


__all__ = ["Settings", "current_settings", "settings_scope"]
