"""UUID-backed implementation of the :class:`IdGenerator` port."""

from __future__ import annotations

import uuid


class UuidIdGenerator:
    """Produces random version-4 UUID strings."""

    def generate(self) -> str:
        return str(uuid.uuid4())
