"""Domain model exports."""

from .encounter import Encounter, InitiativeGroup, build_initiative_groups
from .models import NPC, Character, Creature, Document, Game, Monster, copy_game

__all__ = [
    "Character",
    "Creature",
    "Document",
    "Encounter",
    "Game",
    "InitiativeGroup",
    "Monster",
    "NPC",
    "build_initiative_groups",
    "copy_game",
]
