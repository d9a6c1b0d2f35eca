"""Status: the outcome of an operation, as a canonical code plus context.

``Status`` is the concrete status type shipped with statusor. The container
itself only relies on the ``StatusLike`` contract, so statuses from other
libraries work too as long as they are comparable, hashable, render stably
with ``str()`` and expose ``is_ok()``.
"""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import ClassVar, Protocol, runtime_checkable

from ._validation import _require


class Code(Enum):
    """Canonical status codes, numbered as in the gRPC wire protocol."""

    OK = 0
    CANCELLED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16


@runtime_checkable
class StatusLike(Protocol):
    """Structural contract a status must satisfy to be carried by ``Err``."""

    def is_ok(self) -> bool: ...


@dataclasses.dataclass(frozen=True, slots=True)
class Status:
    """An operation outcome: a code, an optional description and an optional cause.

    One shared instance per code is available as a class attribute
    (``Status.OK``, ``Status.INTERNAL``, ...). Derive richer statuses from them
    with ``with_description`` and ``with_cause``.
    """

    code: Code
    description: str | None = None
    cause: BaseException | None = None

    OK: ClassVar[Status]
    CANCELLED: ClassVar[Status]
    UNKNOWN: ClassVar[Status]
    INVALID_ARGUMENT: ClassVar[Status]
    DEADLINE_EXCEEDED: ClassVar[Status]
    NOT_FOUND: ClassVar[Status]
    ALREADY_EXISTS: ClassVar[Status]
    PERMISSION_DENIED: ClassVar[Status]
    RESOURCE_EXHAUSTED: ClassVar[Status]
    FAILED_PRECONDITION: ClassVar[Status]
    ABORTED: ClassVar[Status]
    OUT_OF_RANGE: ClassVar[Status]
    UNIMPLEMENTED: ClassVar[Status]
    INTERNAL: ClassVar[Status]
    UNAVAILABLE: ClassVar[Status]
    DATA_LOSS: ClassVar[Status]
    UNAUTHENTICATED: ClassVar[Status]

    def __post_init__(self) -> None:
        """Validate field types."""
        _require(
            condition=isinstance(self.code, Code),
            message=f"must be a Code, got {type(self.code).__name__}",
            field_name="code",
            exc=TypeError,
        )
        _require(
            condition=self.description is None or isinstance(self.description, str),
            message="must be str or None",
            field_name="description",
            exc=TypeError,
        )
        _require(
            condition=self.cause is None or isinstance(self.cause, BaseException),
            message="must be an exception or None",
            field_name="cause",
            exc=TypeError,
        )

    @classmethod
    def from_code(cls, code: Code | int) -> Status:
        """Return the shared status for *code*.

        Integers are looked up by wire value; an unrecognized value maps to
        ``UNKNOWN`` with a description naming it.
        """
        _require(
            condition=not isinstance(code, bool),
            message="must be a Code or int, got bool",
            field_name="code",
            exc=TypeError,
        )
        if isinstance(code, Code):
            return _STATUS_BY_CODE[code]
        try:
            return _STATUS_BY_CODE[Code(code)]
        except ValueError:
            return cls.UNKNOWN.with_description(f"Unknown code {code}")

    def is_ok(self) -> bool:
        """Return True when this status denotes success."""
        return self.code is Code.OK

    def with_description(self, description: str | None) -> Status:
        """Return a status with *description* replacing the current one."""
        if description == self.description:
            return self
        return dataclasses.replace(self, description=description)

    def augment_description(self, additional: str | None) -> Status:
        """Return a status whose description has *additional* appended on a new line."""
        if additional is None:
            return self
        if self.description is None:
            return dataclasses.replace(self, description=additional)
        return dataclasses.replace(self, description=f"{self.description}\n{additional}")

    def with_cause(self, cause: BaseException | None) -> Status:
        """Return a status carrying *cause* as the underlying exception."""
        if cause is self.cause:
            return self
        return dataclasses.replace(self, cause=cause)

    def __str__(self) -> str:
        description = "null" if self.description is None else self.description
        cause = "null" if self.cause is None else repr(self.cause)
        return f"Status{{code={self.code.name}, description={description}, cause={cause}}}"


_STATUS_BY_CODE: dict[Code, Status] = {code: Status(code) for code in Code}

for _code, _status in _STATUS_BY_CODE.items():
    setattr(Status, _code.name, _status)
del _code, _status

__all__ = ["Code", "Status", "StatusLike"]
