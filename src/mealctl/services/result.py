"""ServiceResult: what every command hands to the output layer.

Domain ``Result`` values carry a bare reason string. The adapters in
:mod:`mealctl.services.contracts` lift them into a ServiceResult with
an operation name, an error code and a JSON-ready payload.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ServiceError(BaseModel):
    """Error code, message, and optional context for a failed operation."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one CLI operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name, e.g. ``"preparer_quits"``; selects the renderer.
        data: Payload on success.
        warnings: Notes shown on stderr alongside a successful result.
        error: Set when ``ok`` is False.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))

    def with_warning(self, message: str) -> ServiceResult:
        """Copy of this result with *message* appended to ``warnings``."""
        return self.model_copy(update={"warnings": [*self.warnings, message]})
