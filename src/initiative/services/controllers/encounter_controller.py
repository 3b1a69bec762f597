"""Encounter tab: setting up and running an initiative order."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Tuple

from initiative.core.rng import RNG
from initiative.core.types import EncounterPhase
from initiative.domain.encounter import Encounter, build_initiative_groups
from initiative.domain.models import Game
from initiative.services.controllers.commands import Command
from initiative.services.controllers.participant_form import ParticipantForm, ParticipantFormView

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InitiativeGroupView:
    initiative: int
    names: Tuple[str, ...]
    is_current: bool


@dataclass(frozen=True, slots=True)
class EncounterView:
    """Render state of the encounter tab for the current phase."""

    phase: EncounterPhase
    notice: str | None = None
    form: ParticipantFormView | None = None
    summary: str = ""
    round: int = 0
    groups: Tuple[InitiativeGroupView, ...] = ()


class EncounterController:
    """
    Three-phase state machine: idle, collecting participants, active encounter.

    The encounter itself is never persisted; it is dropped on stop, on
    cancellation and whenever the game is closed.
    """

    title = "Encounter"

    def __init__(self, game: Game, rng: RNG) -> None:
        self._game = game
        self._rng = rng
        self._phase: EncounterPhase = "idle"
        self._form: ParticipantForm | None = None
        self._encounter: Encounter | None = None
        self._notice: str | None = None

    @property
    def phase(self) -> EncounterPhase:
        return self._phase

    @property
    def form(self) -> ParticipantForm | None:
        return self._form

    @property
    def encounter(self) -> Encounter | None:
        return self._encounter

    @property
    def is_busy(self) -> bool:
        """True while the participant form owns the keyboard."""
        return self._phase == "collecting"

    def handle(self, command: Command) -> bool:
        if self._phase == "collecting":
            return self._handle_collecting(command)
        if self._phase == "active":
            return self._handle_active(command)
        if command.kind == "new":
            return self.start()
        return False

    def start(self) -> bool:
        """Open the participant form. Requires at least one character."""
        if self._phase != "idle":
            logger.debug("Encounter start refused in phase %s", self._phase)
            return False
        if not self._game.characters:
            self._notice = "Add a character before starting an encounter."
            logger.debug("Encounter start refused: %s has no characters", self._game.name)
            return True
        self._notice = None
        self._form = ParticipantForm(self._game, self._rng)
        self._phase = "collecting"
        return True

    def stop(self) -> bool:
        """End the active encounter and return to idle."""
        encounter = self._encounter
        if self._phase != "active" or encounter is None:
            logger.debug("Encounter stop refused in phase %s", self._phase)
            return False
        encounter.ended_at = datetime.now(timezone.utc)
        logger.info(
            "Encounter '%s' ended after %d round(s)",
            encounter.summary,
            encounter.round,
        )
        self._encounter = None
        self._phase = "idle"
        return True

    def discard(self) -> None:
        """Drop any form or encounter without further ceremony."""
        if self._encounter is not None:
            logger.info("Encounter '%s' discarded", self._encounter.summary)
        self._form = None
        self._encounter = None
        self._notice = None
        self._phase = "idle"

    def view(self) -> EncounterView:
        if self._phase == "collecting" and self._form is not None:
            return EncounterView(phase="collecting", form=self._form.view())
        encounter = self._encounter
        if self._phase == "active" and encounter is not None:
            groups = tuple(
                InitiativeGroupView(
                    initiative=group.initiative,
                    names=tuple(group.names),
                    is_current=index == encounter.turn_index,
                )
                for index, group in enumerate(encounter.initiative_groups)
            )
            return EncounterView(
                phase="active",
                summary=encounter.summary,
                round=encounter.round,
                groups=groups,
            )
        return EncounterView(phase="idle", notice=self._notice)

    def _handle_collecting(self, command: Command) -> bool:
        form = self._form
        assert form is not None
        form.handle(command)
        if form.state == "completed":
            participants = form.participants()
            self._encounter = Encounter(
                summary=form.summary,
                initiative_groups=build_initiative_groups(participants),
                started_at=datetime.now(timezone.utc),
            )
            self._form = None
            self._phase = "active"
            logger.info(
                "Encounter '%s' started with %d participant(s)",
                self._encounter.summary,
                len(participants),
            )
        elif form.state == "cancelled":
            self._form = None
            self._phase = "idle"
            logger.debug("Encounter setup cancelled")
        # the form owns every key while collecting
        return True

    def _handle_active(self, command: Command) -> bool:
        encounter = self._encounter
        assert encounter is not None
        if command.kind == "stop":
            return self.stop()
        if command.kind == "down":
            encounter.advance_turn()
            return True
        if command.kind == "up":
            encounter.rewind_turn()
            return True
        return False
