"""Root controller: game list, game detail and persistence of the Document."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from initiative.core.rng import RNG
from initiative.core.types import AppMode, ListChange
from initiative.domain.models import Document, Game, copy_game
from initiative.services.controllers.commands import Command
from initiative.services.controllers.game_detail_controller import GameDetailController, GameDetailView
from initiative.services.controllers.list_editor import ListEditor, ListView, MappingRecords
from initiative.services.errors import SaveLoadError

logger = logging.getLogger(__name__)


class DocumentSaver(Protocol):
    def save(self, document: Document) -> None:
        """Persist the whole document or raise SaveLoadError."""


@dataclass(frozen=True, slots=True)
class AppView:
    mode: AppMode
    game_list: ListView
    detail: GameDetailView | None
    status: str | None
    text_focus: bool
    form_focus: bool = False
    show_help: bool = False


class AppController:
    """
    Owns the Document and switches between the game list and one open game.

    Opening a game hands a deep copy to a GameDetailController. Roster edits
    are written back under the open game's identifier and saved as they
    happen; the copy is committed once more whenever the game is closed.
    """

    def __init__(self, document: Document, store: DocumentSaver, rng: RNG | None = None) -> None:
        self._document = document
        self._store = store
        self._rng = rng or RNG()
        self._games: MappingRecords[Game] = MappingRecords(document.games, Game)
        self.game_list = ListEditor(
            self._games,
            title="Games",
            on_change=self._games_changed,
            empty_hint="No games yet. Press n to create one.",
        )
        self.mode: AppMode = "game_list"
        self.status: str | None = None
        self.running = True
        self.show_help = False
        self._detail: GameDetailController | None = None
        self._open_game_id: str | None = None

    @property
    def document(self) -> Document:
        return self._document

    @property
    def detail(self) -> GameDetailController | None:
        return self._detail

    @property
    def open_game_id(self) -> str | None:
        return self._open_game_id

    @property
    def form_focus(self) -> bool:
        """True while the encounter participant form owns the keyboard."""
        detail = self._detail
        return detail is not None and detail.current_tab is detail.encounter and detail.encounter.is_busy

    @property
    def text_focus(self) -> bool:
        if self._detail is not None:
            return self._detail.text_focus
        return self.game_list.is_editing

    def handle(self, command: Command) -> bool:
        """Process one command. Returns False once the application should exit."""
        self.status = None
        if command.kind == "quit":
            self.quit()
            return False
        if command.kind == "help":
            self.show_help = not self.show_help
            return True
        if command.kind == "save":
            if self.save():
                self.status = "Saved."
            return True

        if self._detail is not None:
            if self._detail.handle(command) == "back":
                self.close_game()
            return True

        if not self.game_list.handle(command) and command.kind == "select":
            self.open_selected()
        return True

    def open_selected(self) -> bool:
        index = self.game_list.selection
        if self.game_list.is_editing or index is None:
            logger.debug("Open game refused: nothing selected")
            return False
        game_id = self._games.id_at(index)
        if game_id is None:
            return False
        game = copy_game(self._document.games[game_id])
        self._open_game_id = game_id
        self._detail = GameDetailController(game, self._rng, on_data_changed=self._write_back)
        self.mode = "game_detail"
        logger.info("Opened game '%s'", game.name)
        return True

    def close_game(self) -> None:
        """Commit the open game copy and return to the game list."""
        detail = self._detail
        if detail is None:
            return
        game = detail.close()
        if self._open_game_id is not None and self._document.games.get(self._open_game_id) != game:
            self._write_back(game)
        logger.info("Closed game '%s'", game.name)
        self._detail = None
        self._open_game_id = None
        self.mode = "game_list"
        self.game_list.reload()

    def quit(self) -> None:
        self.close_game()
        if self.game_list.is_editing:
            self.game_list.cancel_edit()
        self.running = False

    def save(self) -> bool:
        """Write the document. A failure is reported in ``status``; nothing is rolled back."""
        try:
            self._store.save(self._document)
        except SaveLoadError as exc:
            logger.error("Save failed: %s", exc)
            self.status = f"Save failed: {exc}"
            return False
        return True

    def view(self) -> AppView:
        return AppView(
            mode=self.mode,
            game_list=self.game_list.view(),
            detail=self._detail.view() if self._detail is not None else None,
            status=self.status,
            text_focus=self.text_focus,
            form_focus=self.form_focus,
            show_help=self.show_help,
        )

    def _games_changed(self, change: ListChange) -> None:
        logger.info("Game %s", change)
        self.save()

    def _write_back(self, game: Game) -> None:
        if self._open_game_id is None:
            return
        self._document.games[self._open_game_id] = copy_game(game)
        self.save()
