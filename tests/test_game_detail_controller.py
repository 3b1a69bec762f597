from __future__ import annotations

from typing import List

from initiative.core.rng import RNG
from initiative.domain.models import Character, Game
from initiative.services.controllers import (
    Command,
    EncounterView,
    GameDetailController,
    ListView,
    PlaceholderView,
)


def _build_detail(changes: List[Game] | None = None) -> GameDetailController:
    game = Game(name="Lost Mine", characters={"c1": Character("Shandra")})
    callback = changes.append if changes is not None else None
    return GameDetailController(game, RNG(1), on_data_changed=callback)


def test_tabs_in_fixed_order() -> None:
    detail = _build_detail()
    assert detail.view().tab_titles == ("Encounter", "Characters", "NPCs", "Stats", "Log")
    assert isinstance(detail.view().body, EncounterView)


def test_tab_switching_wraps_both_ways() -> None:
    detail = _build_detail()

    assert detail.handle(Command("prev_tab")) == "handled"
    assert detail.active_tab == 4
    assert isinstance(detail.view().body, PlaceholderView)

    assert detail.handle(Command("next_tab")) == "handled"
    assert detail.active_tab == 0
    detail.handle(Command("next_tab"))
    assert isinstance(detail.view().body, ListView)


def test_back_is_signalled_when_tab_declines() -> None:
    detail = _build_detail()
    assert detail.handle(Command("back")) == "back"


def test_back_while_naming_cancels_instead_of_leaving() -> None:
    detail = _build_detail()
    detail.handle(Command("next_tab"))
    detail.handle(Command("new"))
    assert detail.text_focus

    assert detail.handle(Command("back")) == "handled"
    assert not detail.text_focus
    assert detail.handle(Command("back")) == "back"


def test_tab_switch_swallowed_during_encounter_setup() -> None:
    detail = _build_detail()
    detail.handle(Command("new"))
    assert detail.handle(Command("next_tab")) == "handled"
    assert detail.active_tab == 0


def test_placeholder_tab_ignores_commands() -> None:
    detail = _build_detail()
    detail.handle(Command("prev_tab"))
    assert detail.handle(Command("delete")) == "ignored"


def test_roster_mutations_are_written_through() -> None:
    changes: List[Game] = []
    detail = _build_detail(changes)
    detail.handle(Command("next_tab"))

    detail.handle(Command("new"))
    detail.handle(Command.typed("Tordek"))
    detail.handle(Command("select"))

    assert len(changes) == 1
    assert [c.name for c in changes[0].characters.values()] == ["Shandra", "Tordek"]


def test_close_discards_encounter() -> None:
    detail = _build_detail()
    detail.handle(Command("new"))

    game = detail.close()

    assert detail.encounter.phase == "idle"
    assert game is detail.game
