"""Identifier generation contract.

INVARIANT: IDs are permanent. Once assigned at creation, a plan's ID
never changes. The aggregate never reaches for a global random source;
callers inject an :class:`IdGenerator`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IdGenerator(Protocol):
    """Single-method capability producing a fresh, globally unique ID."""

    def generate(self) -> str: ...
