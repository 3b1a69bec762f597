"""Factory for ad-hoc monsters added during encounter setup."""
from __future__ import annotations

from typing import Collection, Iterable

from initiative.domain.models import Monster

MONSTER_BASE_NAME = "Monster"


def next_suffix(taken: Collection[str]) -> str:
    """Return the first free suffix: A..Z, then A1, A2, ..."""
    for offset in range(26):
        suffix = chr(ord("A") + offset)
        if suffix not in taken:
            return suffix
    counter = 1
    while True:
        suffix = f"A{counter}"
        if suffix not in taken:
            return suffix
        counter += 1


def create_monster(existing_names: Iterable[str], base_name: str = MONSTER_BASE_NAME) -> Monster:
    """Create ``<base_name> <suffix>`` with a suffix unused by ``existing_names``."""
    prefix = f"{base_name} "
    taken = {name[len(prefix):] for name in existing_names if name.startswith(prefix)}
    return Monster(name=f"{prefix}{next_suffix(taken)}")
