"""Participant-selection form shown while an encounter is being set up."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Literal, Tuple

from initiative.core.rng import RNG
from initiative.domain.models import Creature, Game
from initiative.services.controllers.commands import Command
from initiative.services.factories import create_monster

logger = logging.getLogger(__name__)

FormState = Literal["editing", "completed", "cancelled"]
ParticipantKind = Literal["character", "npc", "monster"]

MAX_SUMMARY_LENGTH = 80
_INITIATIVE_TEXT = re.compile(r"-?\d{0,3}")


@dataclass(slots=True)
class ParticipantEntry:
    """One creature that may take part in the encounter."""

    creature: Creature
    kind: ParticipantKind
    selected: bool = False
    initiative_text: str = ""


@dataclass(frozen=True, slots=True)
class ParticipantRowView:
    name: str
    kind: ParticipantKind
    selected: bool
    initiative_text: str
    is_focused: bool


@dataclass(frozen=True, slots=True)
class ParticipantFormView:
    summary: str
    summary_focused: bool
    rows: Tuple[ParticipantRowView, ...]
    error: str | None
    state: FormState


class ParticipantForm:
    """
    Collects the encounter summary and the participants with their initiative.

    Cursor row 0 is the summary field; rows 1.. are participant entries. The
    form is seeded with every character (selected) followed by every NPC
    (unselected). Submission requires at least one selected participant and
    an integer initiative for each of them.
    """

    def __init__(self, game: Game, rng: RNG) -> None:
        self._rng = rng
        self.summary = ""
        self.entries: List[ParticipantEntry] = [
            ParticipantEntry(creature=character, kind="character", selected=True)
            for character in game.characters.values()
        ]
        self.entries.extend(
            ParticipantEntry(creature=npc, kind="npc") for npc in game.npcs.values()
        )
        self.cursor = 0
        self.state: FormState = "editing"
        self.error: str | None = None
        self._participants: List[Tuple[Creature, int]] = []

    @property
    def is_open(self) -> bool:
        return self.state == "editing"

    @property
    def focused_entry(self) -> ParticipantEntry | None:
        if self.cursor == 0:
            return None
        return self.entries[self.cursor - 1]

    def participants(self) -> List[Tuple[Creature, int]]:
        """Selected creatures with their initiative, in form order. Empty until completed."""
        return list(self._participants)

    def handle(self, command: Command) -> bool:
        """Apply a command. Every command is consumed while the form is open."""
        if not self.is_open:
            return False
        kind = command.kind
        if kind == "up":
            self.move(-1)
        elif kind == "down":
            self.move(1)
        elif kind == "text":
            self.type_text(command.text)
        elif kind == "backspace":
            self.backspace()
        elif kind == "clear":
            self.clear_field()
        elif kind == "toggle":
            self.toggle()
        elif kind == "roll":
            self.roll()
        elif kind == "new":
            self.add_monster()
        elif kind == "select":
            self.submit()
        elif kind in ("cancel", "back"):
            self.cancel()
        return True

    def move(self, delta: int) -> None:
        self.cursor = max(0, min(self.cursor + delta, len(self.entries)))

    def type_text(self, text: str) -> bool:
        entry = self.focused_entry
        if entry is None:
            self.summary = (self.summary + text)[:MAX_SUMMARY_LENGTH]
            return True
        candidate = entry.initiative_text + text.strip()
        if not _INITIATIVE_TEXT.fullmatch(candidate):
            logger.debug("Rejected initiative input %r for %s", text, entry.creature.name)
            return False
        entry.initiative_text = candidate
        return True

    def backspace(self) -> None:
        entry = self.focused_entry
        if entry is None:
            self.summary = self.summary[:-1]
        else:
            entry.initiative_text = entry.initiative_text[:-1]

    def clear_field(self) -> None:
        entry = self.focused_entry
        if entry is None:
            self.summary = ""
        else:
            entry.initiative_text = ""

    def toggle(self) -> bool:
        entry = self.focused_entry
        if entry is None:
            return False
        entry.selected = not entry.selected
        return True

    def roll(self) -> bool:
        """Roll a d20 for the focused entry."""
        entry = self.focused_entry
        if entry is None:
            return False
        entry.initiative_text = str(self._rng.roll())
        return True

    def add_monster(self) -> ParticipantEntry:
        """Append a selected ad-hoc monster and focus it."""
        monster = create_monster(entry.creature.name for entry in self.entries)
        entry = ParticipantEntry(creature=monster, kind="monster", selected=True)
        self.entries.append(entry)
        self.cursor = len(self.entries)
        return entry

    def submit(self) -> bool:
        chosen = [entry for entry in self.entries if entry.selected]
        if not chosen:
            self.error = "Select at least one participant."
            return False
        participants: List[Tuple[Creature, int]] = []
        for entry in chosen:
            try:
                initiative = int(entry.initiative_text)
            except ValueError:
                self.error = f"{entry.creature.name} needs an initiative value."
                return False
            participants.append((entry.creature, initiative))
        self._participants = participants
        self.summary = self.summary.strip()
        self.error = None
        self.state = "completed"
        return True

    def cancel(self) -> None:
        self.state = "cancelled"
        self.error = None

    def view(self) -> ParticipantFormView:
        return ParticipantFormView(
            summary=self.summary,
            summary_focused=self.cursor == 0,
            rows=tuple(
                ParticipantRowView(
                    name=entry.creature.name,
                    kind=entry.kind,
                    selected=entry.selected,
                    initiative_text=entry.initiative_text,
                    is_focused=self.cursor == index,
                )
                for index, entry in enumerate(self.entries, start=1)
            ),
            error=self.error,
            state=self.state,
        )
