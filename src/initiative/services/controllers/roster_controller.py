"""Character and NPC roster tabs of the game detail view."""
from __future__ import annotations

from typing import Callable, Dict

from initiative.core.types import ListChange, RosterKind
from initiative.domain.models import NPC, Character, Game
from initiative.services.controllers.commands import Command
from initiative.services.controllers.list_editor import ListEditor, ListView, MappingRecords

_TITLES: Dict[str, str] = {"characters": "Characters", "npcs": "NPCs"}
_EMPTY_HINTS: Dict[str, str] = {
    "characters": "No characters yet. Press n to add one.",
    "npcs": "No NPCs yet. Press n to add one.",
}


class RosterController:
    """List editor over one roster of a game, reporting every mutation upward."""

    def __init__(self, game: Game, kind: RosterKind, on_change: Callable[[], None]) -> None:
        if kind == "characters":
            records = MappingRecords(game.characters, Character)
        elif kind == "npcs":
            records = MappingRecords(game.npcs, NPC)
        else:
            raise ValueError(f"Unknown roster kind '{kind}'.")
        self.kind = kind
        self.title = _TITLES[kind]
        self._on_change = on_change
        self._editor = ListEditor(
            records,
            title=self.title,
            on_change=self._handle_change,
            empty_hint=_EMPTY_HINTS[kind],
        )

    @property
    def editor(self) -> ListEditor:
        return self._editor

    @property
    def is_busy(self) -> bool:
        """True while a name is being typed."""
        return self._editor.is_editing

    def handle(self, command: Command) -> bool:
        if not self._editor.is_editing and command.kind == "select":
            # enter on a roster row renames it
            return self._editor.start_edit()
        return self._editor.handle(command)

    def view(self) -> ListView:
        return self._editor.view()

    def _handle_change(self, change: ListChange) -> None:
        self._on_change()
