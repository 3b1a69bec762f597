from __future__ import annotations

import pytest

from initiative.domain.models import NPC, Character, Game
from initiative.services.controllers import Command, RosterController


def _build_game() -> Game:
    return Game(name="Lost Mine", characters={"c1": Character("Shandra")}, npcs={"n1": NPC("Sildar")})


def test_character_roster_creates_characters() -> None:
    game = _build_game()
    notifications = []
    roster = RosterController(game, "characters", lambda: notifications.append(True))

    roster.handle(Command("new"))
    assert roster.is_busy
    roster.handle(Command.typed("Tordek"))
    roster.handle(Command("select"))

    assert [c.name for c in game.characters.values()] == ["Shandra", "Tordek"]
    assert all(isinstance(c, Character) for c in game.characters.values())
    assert notifications == [True]
    assert not roster.is_busy


def test_npc_roster_uses_npc_records() -> None:
    game = _build_game()
    roster = RosterController(game, "npcs", lambda: None)

    roster.editor.start_create()
    roster.editor.type_text("Gundren")
    roster.editor.commit_edit()

    assert [n.name for n in game.npcs.values()] == ["Sildar", "Gundren"]
    assert isinstance(game.npcs[list(game.npcs)[-1]], NPC)
    assert roster.view().title == "NPCs"


def test_select_on_row_starts_rename() -> None:
    game = _build_game()
    roster = RosterController(game, "characters", lambda: None)

    assert roster.handle(Command("select"))
    assert roster.editor.slot.buffer == "Shandra"


def test_delete_notifies_and_cancel_does_not() -> None:
    game = _build_game()
    notifications = []
    roster = RosterController(game, "characters", lambda: notifications.append(True))

    roster.handle(Command("new"))
    roster.handle(Command("cancel"))
    assert notifications == []

    roster.handle(Command("delete"))
    assert game.characters == {}
    assert notifications == [True]


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ValueError):
        RosterController(_build_game(), "monsters", lambda: None)  # type: ignore[arg-type]
