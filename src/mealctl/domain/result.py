"""Result — tagged success/failure outcome for business-rule checks.

INVARIANT: Expected rule violations are reported as ``Result.failure``,
never raised. Reading the wrong variant is a caller bug and raises
:class:`ResultAccessError`.
"""

from __future__ import annotations

from typing import Any, cast


class ResultAccessError(RuntimeError):
    """Raised when the value of a failure or the error of a success is read."""


class Result[T]:
    """Two-variant outcome: success with an optional value, or failure with a reason.

    Usage::

        result = plan.preparer_quits()
        if result.is_failure:
            return Result.failure(result.error)
    """

    __slots__ = ("_error", "_ok", "_value")

    def __init__(self, ok: bool, value: T | None = None, error: str | None = None) -> None:
        if ok and error is not None:
            raise ValueError("A successful result cannot carry an error")
        if not ok and not error:
            raise ValueError("A failed result requires an error reason")
        object.__setattr__(self, "_ok", ok)
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_error", error)

    @classmethod
    def success(cls, value: T | None = None) -> Result[T]:
        return cls(True, value=value)

    @classmethod
    def failure(cls, error: str) -> Result[T]:
        return cls(False, error=error)

    @property
    def is_success(self) -> bool:
        return self._ok

    @property
    def is_failure(self) -> bool:
        return not self._ok

    @property
    def value(self) -> T:
        """The success payload (``None`` for void successes)."""
        if not self._ok:
            msg = f"Attempted to read the value of a failed result: {self._error}"
            raise ResultAccessError(msg)
        return self._value  # type: ignore[return-value]

    @property
    def error(self) -> str:
        """The failure reason."""
        if self._ok:
            raise ResultAccessError("Attempted to read the error of a successful result")
        return cast(str, self._error)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Result is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return (self._ok, self._value, self._error) == (other._ok, other._value, other._error)

    def __hash__(self) -> int:
        return hash((self._ok, self._error))

    def __repr__(self) -> str:
        if self._ok:
            return f"Result.success({self._value!r})"
        return f"Result.failure({self._error!r})"
