"""Ephemeral encounter state. Nothing in this module is ever saved."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Sequence, Tuple

from initiative.domain.models import Creature


@dataclass(slots=True)
class InitiativeGroup:
    """Creatures sharing one initiative value, acting together."""

    initiative: int
    creatures: List[Creature] = field(default_factory=list)

    @property
    def names(self) -> List[str]:
        return [creature.name for creature in self.creatures]


@dataclass(slots=True)
class Encounter:
    """A running encounter with its initiative order and turn pointer."""

    summary: str
    initiative_groups: List[InitiativeGroup]
    started_at: datetime | None = None
    ended_at: datetime | None = None
    round: int = 1
    turn_index: int = 0

    @property
    def current_group(self) -> InitiativeGroup | None:
        if not self.initiative_groups:
            return None
        return self.initiative_groups[self.turn_index]

    def advance_turn(self) -> None:
        """Move to the next group, starting a new round after the last one."""
        if not self.initiative_groups:
            return
        next_index = self.turn_index + 1
        if next_index >= len(self.initiative_groups):
            next_index = 0
            self.round += 1
        self.turn_index = next_index

    def rewind_turn(self) -> None:
        """Step back one group. The very first turn of round 1 stays put."""
        if not self.initiative_groups:
            return
        if self.turn_index > 0:
            self.turn_index -= 1
            return
        if self.round > 1:
            self.round -= 1
            self.turn_index = len(self.initiative_groups) - 1


def build_initiative_groups(participants: Sequence[Tuple[Creature, int]]) -> List[InitiativeGroup]:
    """
    Group participants by initiative.

    Participants arrive in selection order. Equal initiatives share one group
    (members keep selection order) and groups are ordered highest first.
    """
    groups: Dict[int, InitiativeGroup] = {}
    for creature, initiative in participants:
        group = groups.get(initiative)
        if group is None:
            group = InitiativeGroup(initiative=initiative)
            groups[initiative] = group
        group.creatures.append(creature)
    # sorted() is stable, so first appearance breaks ties
    return sorted(groups.values(), key=lambda group: -group.initiative)
