"""Error values and failures raised by todo repositories."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NotFound:
    """Returned by ``update``/``delete`` when no record exists for ``id``."""

    id: int

    def __str__(self) -> str:
        return f"NotFound, id is {self.id}"


class StorePoisonedError(RuntimeError):
    """A writer failed while holding the store lock; the state can't be trusted."""
