"""Persisted domain records: games and their rosters."""
from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Dict, Protocol


class Creature(Protocol):
    """Anything that can take a turn in an initiative group."""

    name: str


@dataclass(slots=True)
class Character:
    """A player character in a game's roster."""

    name: str


@dataclass(slots=True)
class NPC:
    """A non-player character tracked alongside the party."""

    name: str


@dataclass(slots=True)
class Monster:
    """An ad-hoc opponent added while setting up an encounter. Never persisted."""

    name: str


@dataclass(slots=True)
class Game:
    """A campaign with its character and NPC rosters."""

    name: str
    characters: Dict[str, Character] = field(default_factory=dict)
    npcs: Dict[str, NPC] = field(default_factory=dict)


@dataclass(slots=True)
class Document:
    """Root of the persisted data: every game keyed by identifier."""

    games: Dict[str, Game] = field(default_factory=dict)


def copy_game(game: Game) -> Game:
    """Return a detached copy that shares no mutable state with ``game``."""
    return copy.deepcopy(game)
