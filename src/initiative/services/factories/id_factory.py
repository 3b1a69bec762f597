"""Utilities for creating unique record identifiers."""
from __future__ import annotations

import uuid
from typing import Container


def make_record_id(existing: Container[str] = ()) -> str:
    """Generate an opaque identifier that does not collide with ``existing``."""
    while True:
        record_id = str(uuid.uuid4())
        if record_id not in existing:
            return record_id
