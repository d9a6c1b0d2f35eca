"""StatusOr: a value or the status explaining why there is none.

``StatusOr`` carries the outcome of a fallible operation in a single return
slot. It is a closed union of two variants:

- ``Ok(result)``: the operation succeeded and produced ``result``;
- ``Err(status)``: the operation failed with a non-OK ``status``.

Prefer structural pattern matching over the accessors:

    match StatusOr.from_result(42):
        case Ok(value):
            ...
        case Err(status):
            ...
"""

from __future__ import annotations

import abc
import dataclasses
from typing import TYPE_CHECKING, Never, final

from ._validation import _require
from .config import current_settings
from .errors import VariantAccessError
from .status import StatusLike

if TYPE_CHECKING:
    from collections.abc import Callable

_GATE_HINT = "Check is_ok() first, or match on Ok(...) / Err(...)."


def _same(a: object, b: object) -> bool:
    """Payload equality with the identity shortcut Python containers use."""
    return a is b or bool(a == b)


def _wrong_variant(accessor: str, variant: str) -> None:
    """Enforce strict accessors; a no-op under the default settings."""
    if current_settings().strict_accessors:
        raise VariantAccessError(
            f"{accessor}() called on {variant}",
            hint=_GATE_HINT,
            accessor=accessor,
        )


class StatusOr[T](abc.ABC):
    """Either a successful ``result`` or a non-OK ``status``, never both or neither.

    This base class is abstract; build instances with ``from_result`` and
    ``from_status`` (or the ``Ok`` / ``Err`` variants). Instances are
    immutable and compare structurally.
    """

    __slots__ = ()

    @staticmethod
    def from_result[R](result: R) -> Ok[R]:
        """Create a ``StatusOr`` holding a successfully produced *result*.

        Raises:
            InvalidArgumentError: If *result* is ``None``.
        """
        return Ok(result)

    @staticmethod
    def from_status(status: StatusLike) -> Err:
        """Create a ``StatusOr`` holding a *status* that describes a failure.

        Success is represented only by a result, so an OK status is rejected.
        The returned ``Err`` is a valid ``StatusOr[T]`` for any ``T``.

        Raises:
            InvalidArgumentError: If *status* is ``None`` or OK.
            TypeError: If *status* has no ``is_ok()`` method.
        """
        return Err(status)

    @abc.abstractmethod
    def get_result(self) -> T | None:
        """Return the result, or ``None`` if this holds a status."""

    @abc.abstractmethod
    def get_status(self) -> StatusLike | None:
        """Return the status, or ``None`` if this holds a result."""

    @abc.abstractmethod
    def is_ok(self) -> bool:
        """Return True if this holds a result."""

    @abc.abstractmethod
    def result_or[D](self, default: D) -> T | D:
        """Return the result, or *default* if this holds a status."""


@final
@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class Ok[T](StatusOr[T]):
    """The success variant: carries a present ``result``."""

    result: T

    def __post_init__(self) -> None:
        _require(
            condition=self.result is not None,
            message="must not be None",
            field_name="result",
            hint="Use StatusOr.from_status() to report a failure.",
        )

    def get_result(self) -> T:
        return self.result

    def get_status(self) -> None:
        _wrong_variant("get_status", "Ok")
        return None

    def is_ok(self) -> bool:
        return True

    def result_or[D](self, default: D) -> T:
        del default
        return self.result

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if isinstance(other, Ok):
            return _same(self.result, other.result)
        if isinstance(other, StatusOr):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("result", self.result))

    def __str__(self) -> str:
        return f"StatusOr{{result={self.result}}}"


@final
@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class Err(StatusOr[Never]):
    """The failure variant: carries a present, non-OK ``status``."""

    status: StatusLike

    def __post_init__(self) -> None:
        _require(
            condition=self.status is not None,
            message="must not be None",
            field_name="status",
            hint="Pass a Status describing the failure.",
        )
        is_ok: Callable[[], bool] | None = getattr(self.status, "is_ok", None)
        _require(
            condition=isinstance(self.status, StatusLike) and callable(is_ok),
            message=f"expected a status with is_ok(), got {type(self.status).__name__}",
            field_name="status",
            exc=TypeError,
        )
        _require(
            condition=is_ok is None or not is_ok(),
            message="an OK status cannot be used to create a failed StatusOr",
            field_name="status",
            hint="Use StatusOr.from_result() to report success.",
        )

    def get_result(self) -> None:
        _wrong_variant("get_result", "Err")
        return None

    def get_status(self) -> StatusLike:
        return self.status

    def is_ok(self) -> bool:
        return False

    def result_or[D](self, default: D) -> D:
        return default

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if isinstance(other, Err):
            return _same(self.status, other.status)
        if isinstance(other, StatusOr):
            return False
        return NotImplemented

    def __hash__(self) -> int:
        return hash(("status", self.status))

    def __str__(self) -> str:
        return f"StatusOr{{status={self.status}}}"


__all__ = ["Err", "Ok", "StatusOr"]
