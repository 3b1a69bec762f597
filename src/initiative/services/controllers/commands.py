"""Logical commands consumed by the controllers."""
from __future__ import annotations

from dataclasses import dataclass

from initiative.core.types import CommandKind


@dataclass(frozen=True, slots=True)
class Command:
    """A single input event, already translated from physical keys."""

    kind: CommandKind
    text: str = ""

    @classmethod
    def typed(cls, text: str) -> "Command":
        """Free-text input for a focused edit buffer or form field."""
        return cls("text", text)
