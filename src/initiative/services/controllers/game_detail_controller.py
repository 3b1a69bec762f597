"""Tabbed detail view of a single game."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Literal, Protocol, Tuple, Union

from initiative.core.rng import RNG
from initiative.domain.models import Game
from initiative.services.controllers.commands import Command
from initiative.services.controllers.encounter_controller import EncounterController, EncounterView
from initiative.services.controllers.list_editor import ListView
from initiative.services.controllers.roster_controller import RosterController

logger = logging.getLogger(__name__)

DetailSignal = Literal["handled", "ignored", "back"]


class DetailTab(Protocol):
    title: str

    @property
    def is_busy(self) -> bool:
        """True while the tab holds keyboard focus for text entry."""

    def handle(self, command: Command) -> bool:
        """Return True when the tab consumed the command."""

    def view(self) -> object:
        """Return the tab's render state."""


@dataclass(frozen=True, slots=True)
class PlaceholderView:
    title: str
    message: str


class PlaceholderTab:
    """A tab with no behaviour yet; declines every command."""

    def __init__(self, title: str, message: str = "Nothing here yet.") -> None:
        self.title = title
        self._message = message

    @property
    def is_busy(self) -> bool:
        return False

    def handle(self, command: Command) -> bool:
        return False

    def view(self) -> PlaceholderView:
        return PlaceholderView(title=self.title, message=self._message)


TabBody = Union[EncounterView, ListView, PlaceholderView]


@dataclass(frozen=True, slots=True)
class GameDetailView:
    game_name: str
    tab_titles: Tuple[str, ...]
    active_tab: int
    body: TabBody
    text_focus: bool


class GameDetailController:
    """
    Routes commands to the active tab and handles tab switching.

    The controller works on a detached copy of one Game. Roster mutations are
    reported through ``on_data_changed`` so the owner can persist them; the
    detail controller itself never sees the Document.
    """

    def __init__(
        self,
        game: Game,
        rng: RNG,
        on_data_changed: Callable[[Game], None] | None = None,
    ) -> None:
        self._game = game
        self._on_data_changed = on_data_changed
        self.encounter = EncounterController(game, rng)
        self.characters = RosterController(game, "characters", self._roster_changed)
        self.npcs = RosterController(game, "npcs", self._roster_changed)
        self._tabs: List[DetailTab] = [
            self.encounter,
            self.characters,
            self.npcs,
            PlaceholderTab("Stats", "Stats tracking is not available yet."),
            PlaceholderTab("Log", "The session log is not available yet."),
        ]
        self.active_tab = 0

    @property
    def game(self) -> Game:
        return self._game

    @property
    def current_tab(self) -> DetailTab:
        return self._tabs[self.active_tab]

    @property
    def text_focus(self) -> bool:
        return self.current_tab.is_busy

    def handle(self, command: Command) -> DetailSignal:
        if self.current_tab.handle(command):
            return "handled"
        if command.kind == "next_tab":
            self.switch_tab(1)
            return "handled"
        if command.kind == "prev_tab":
            self.switch_tab(-1)
            return "handled"
        if command.kind == "back":
            return "back"
        logger.debug("Game detail ignored command %s on tab %s", command.kind, self.current_tab.title)
        return "ignored"

    def switch_tab(self, delta: int) -> None:
        self.active_tab = (self.active_tab + delta) % len(self._tabs)

    def close(self) -> Game:
        """Drop ephemeral state and hand back the game copy."""
        self.encounter.discard()
        for roster in (self.characters, self.npcs):
            if roster.is_busy:
                roster.editor.cancel_edit()
        return self._game

    def view(self) -> GameDetailView:
        return GameDetailView(
            game_name=self._game.name,
            tab_titles=tuple(tab.title for tab in self._tabs),
            active_tab=self.active_tab,
            body=self.current_tab.view(),
            text_focus=self.text_focus,
        )

    def _roster_changed(self) -> None:
        if self._on_data_changed is not None:
            self._on_data_changed(self._game)
