from __future__ import annotations

from initiative.domain.encounter import Encounter, InitiativeGroup, build_initiative_groups
from initiative.domain.models import NPC, Character, Monster


def test_equal_initiatives_share_a_group_in_selection_order() -> None:
    a, b, c = Character("A"), Character("B"), Character("C")

    groups = build_initiative_groups([(a, 15), (b, 12), (c, 15)])

    assert [group.initiative for group in groups] == [15, 12]
    assert groups[0].creatures == [a, c]
    assert groups[1].creatures == [b]


def test_groups_sorted_descending_with_mixed_creatures() -> None:
    groups = build_initiative_groups(
        [(Character("Shandra"), 3), (NPC("Sildar"), 18), (Monster("Monster A"), -1), (Monster("Monster B"), 18)]
    )
    assert [(group.initiative, group.names) for group in groups] == [
        (18, ["Sildar", "Monster B"]),
        (3, ["Shandra"]),
        (-1, ["Monster A"]),
    ]


def test_empty_participants_give_no_groups() -> None:
    assert build_initiative_groups([]) == []


def _build_encounter() -> Encounter:
    groups = [InitiativeGroup(20, [Character("A")]), InitiativeGroup(10, [Character("B")])]
    return Encounter(summary="Goblin ambush", initiative_groups=groups)


def test_advance_turn_wraps_into_next_round() -> None:
    encounter = _build_encounter()

    encounter.advance_turn()
    assert (encounter.round, encounter.turn_index) == (1, 1)
    encounter.advance_turn()
    assert (encounter.round, encounter.turn_index) == (2, 0)
    assert encounter.current_group.initiative == 20


def test_rewind_turn_steps_back_across_rounds() -> None:
    encounter = _build_encounter()
    encounter.rewind_turn()
    assert (encounter.round, encounter.turn_index) == (1, 0)

    encounter.advance_turn()
    encounter.advance_turn()
    encounter.rewind_turn()
    assert (encounter.round, encounter.turn_index) == (1, 1)
