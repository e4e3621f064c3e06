"""Collision records and the error raised for them in strict mode."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

CollisionKind = Literal["operation", "response", "definition"]


class Collision(BaseModel):
    """A key that was written more than once while assembling a document.

    The later write always wins; this record only makes the overwrite visible.
    """

    model_config = ConfigDict(frozen=True)

    kind: CollisionKind
    key: str
    detail: str = ""

    def __str__(self) -> str:
        text = f"{self.kind} {self.key}"
        return f"{text}: {self.detail}" if self.detail else text


class DocumentConflictError(ValueError):
    """Raised by a strict assembler when any collision was detected."""

    def __init__(self, collisions: list[Collision]):
        self.collisions = collisions
        lines = "\n".join(f"  - {c}" for c in collisions)
        super().__init__(f"{len(collisions)} conflicting declaration(s):\n{lines}")
