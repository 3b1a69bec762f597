"""UI-agnostic controllers for the game list, game detail and encounter flow."""
from __future__ import annotations

from .app_controller import AppController, AppView, DocumentSaver
from .commands import Command
from .encounter_controller import EncounterController, EncounterView, InitiativeGroupView
from .game_detail_controller import (
    DetailSignal,
    GameDetailController,
    GameDetailView,
    PlaceholderTab,
    PlaceholderView,
)
from .list_editor import EditingSlot, ListEditor, ListRowView, ListView, MappingRecords, RecordCollection
from .participant_form import ParticipantEntry, ParticipantForm, ParticipantFormView, ParticipantRowView
from .roster_controller import RosterController

__all__ = [
    "AppController",
    "AppView",
    "Command",
    "DetailSignal",
    "DocumentSaver",
    "EditingSlot",
    "EncounterController",
    "EncounterView",
    "GameDetailController",
    "GameDetailView",
    "InitiativeGroupView",
    "ListEditor",
    "ListRowView",
    "ListView",
    "MappingRecords",
    "ParticipantEntry",
    "ParticipantForm",
    "ParticipantFormView",
    "ParticipantRowView",
    "PlaceholderTab",
    "PlaceholderView",
    "RecordCollection",
    "RosterController",
]
