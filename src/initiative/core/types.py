"""Shared type aliases for the core, domain and controller layers."""
from typing import Literal

CommandKind = Literal[
    "new",
    "edit",
    "delete",
    "select",
    "save",
    "cancel",
    "next_tab",
    "prev_tab",
    "back",
    "quit",
    "up",
    "down",
    "toggle",
    "roll",
    "stop",
    "text",
    "backspace",
    "clear",
    "help",
]
AppMode = Literal["game_list", "game_detail"]
EncounterPhase = Literal["idle", "collecting", "active"]
RosterKind = Literal["characters", "npcs"]
ListChange = Literal["created", "renamed", "deleted"]

__all__ = ["AppMode", "CommandKind", "EncounterPhase", "ListChange", "RosterKind"]
