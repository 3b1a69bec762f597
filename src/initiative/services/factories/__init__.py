"""Factory helpers for records and encounter participants."""

from .id_factory import make_record_id
from .monster_factory import create_monster, next_suffix

__all__ = [
    "create_monster",
    "make_record_id",
    "next_suffix",
]
