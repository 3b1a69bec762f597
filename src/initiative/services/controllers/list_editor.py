"""In-place create/rename/delete controller for an ordered list of named records."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, List, MutableMapping, Protocol, Tuple, TypeVar

from initiative.core.types import ListChange
from initiative.services.controllers.commands import Command
from initiative.services.factories import make_record_id

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 50


class NamedRecord(Protocol):
    name: str


RecordT = TypeVar("RecordT", bound=NamedRecord)


class RecordCollection(Protocol):
    """Ordered view over caller-owned records, as seen by a ListEditor."""

    def __len__(self) -> int:
        """Number of rows, including a speculative row if one exists."""

    def name_at(self, index: int) -> str:
        """Display name of the row at ``index``."""

    def record_at(self, index: int) -> NamedRecord:
        """Record backing the row at ``index``."""

    def append_blank(self) -> int:
        """Append a speculative blank row and return its index."""

    def commit_name(self, index: int, name: str) -> None:
        """Persist ``name`` for the row, creating the record if it is speculative."""

    def discard(self, index: int) -> None:
        """Drop the speculative row at ``index``."""

    def remove(self, index: int) -> None:
        """Delete the record at ``index`` from the backing storage."""

    def refresh(self) -> None:
        """Rebuild the row order from the backing storage."""


class MappingRecords(Generic[RecordT]):
    """
    RecordCollection over a ``dict[id, record]`` owned by the caller.

    Rows follow the mapping's insertion order. A speculative row lives only in
    this view until it is committed, at which point it receives a fresh
    identifier and is inserted into the mapping.
    """

    def __init__(self, mapping: MutableMapping[str, RecordT], factory: Callable[[str], RecordT]) -> None:
        self._mapping = mapping
        self._factory = factory
        self._order: List[str | None] = list(mapping.keys())
        self._pending: RecordT | None = None

    def __len__(self) -> int:
        return len(self._order)

    def id_at(self, index: int) -> str | None:
        """Identifier of the row, or None for the speculative row."""
        return self._order[index]

    def name_at(self, index: int) -> str:
        return self.record_at(index).name

    def record_at(self, index: int) -> RecordT:
        record_id = self._order[index]
        if record_id is None:
            assert self._pending is not None
            return self._pending
        return self._mapping[record_id]

    def append_blank(self) -> int:
        if self._pending is not None:
            raise RuntimeError("A speculative record already exists.")
        self._pending = self._factory("")
        self._order.append(None)
        return len(self._order) - 1

    def commit_name(self, index: int, name: str) -> None:
        record = self.record_at(index)
        record.name = name
        if self._order[index] is None:
            record_id = make_record_id(self._mapping)
            self._mapping[record_id] = record
            self._order[index] = record_id
            self._pending = None

    def discard(self, index: int) -> None:
        if self._order[index] is not None:
            raise ValueError(f"Row {index} is not speculative.")
        del self._order[index]
        self._pending = None

    def remove(self, index: int) -> None:
        record_id = self._order.pop(index)
        if record_id is None:
            self._pending = None
            return
        del self._mapping[record_id]

    def refresh(self) -> None:
        self._order = list(self._mapping.keys())
        self._pending = None


@dataclass(slots=True)
class EditingSlot:
    """The single in-progress create or rename of one list row."""

    target_index: int
    is_speculative: bool
    buffer: str = ""
    restore_selection: int | None = None


@dataclass(frozen=True, slots=True)
class ListRowView:
    label: str
    is_selected: bool
    is_editing: bool
    is_new: bool


@dataclass(frozen=True, slots=True)
class ListView:
    """Presentation view of a list editor."""

    title: str
    rows: Tuple[ListRowView, ...]
    selected_index: int | None
    is_editing: bool
    buffer: str
    empty_hint: str


class ListEditor:
    """
    Controller over a RecordCollection supporting select, create, rename and delete.

    Name entry happens inline in the edited row. At most one EditingSlot is
    open at a time; a create appends a speculative row that is rolled back if
    the edit is cancelled.

    Operations that are invalid in the current state (delete on an empty list,
    starting an edit while one is open, ...) leave the state untouched and
    return False.
    """

    def __init__(
        self,
        records: RecordCollection,
        *,
        title: str,
        on_change: Callable[[ListChange], None] | None = None,
        empty_hint: str = "",
    ) -> None:
        self._records = records
        self._title = title
        self._on_change = on_change
        self._empty_hint = empty_hint
        self._slot: EditingSlot | None = None
        self._selection: int | None = 0 if len(records) else None

    def __len__(self) -> int:
        return len(self._records)

    @property
    def selection(self) -> int | None:
        return self._selection

    @property
    def slot(self) -> EditingSlot | None:
        return self._slot

    @property
    def is_editing(self) -> bool:
        return self._slot is not None

    def selected(self) -> NamedRecord | None:
        """Return the record under the cursor, or None when the list is empty."""
        if self._selection is None:
            return None
        return self._records.record_at(self._selection)

    # -----------------------
    # Navigation
    # -----------------------

    def select(self, index: int) -> bool:
        if self._slot is not None:
            return self._refuse("select", "an edit is in progress")
        if not 0 <= index < len(self._records):
            return self._refuse("select", f"index {index} out of range")
        self._selection = index
        return True

    def move(self, delta: int) -> bool:
        """Move the cursor by ``delta`` rows, stopping at either end."""
        if self._slot is not None:
            return self._refuse("move", "an edit is in progress")
        if self._selection is None:
            return self._refuse("move", "the list is empty")
        self._selection = self._clamp(self._selection + delta)
        return True

    # -----------------------
    # Editing lifecycle
    # -----------------------

    def start_create(self) -> bool:
        if self._slot is not None:
            return self._refuse("start_create", "an edit is in progress")
        restore = self._selection
        index = self._records.append_blank()
        self._slot = EditingSlot(target_index=index, is_speculative=True, buffer="", restore_selection=restore)
        self._selection = index
        return True

    def start_edit(self, index: int | None = None) -> bool:
        if self._slot is not None:
            return self._refuse("start_edit", "an edit is in progress")
        if index is None:
            index = self._selection
        if index is None or not 0 <= index < len(self._records):
            return self._refuse("start_edit", f"index {index} out of range")
        self._slot = EditingSlot(
            target_index=index,
            is_speculative=False,
            buffer=self._records.name_at(index),
            restore_selection=self._selection,
        )
        self._selection = index
        return True

    def commit_edit(self) -> bool:
        slot = self._slot
        if slot is None:
            return self._refuse("commit_edit", "no edit in progress")
        name = slot.buffer.strip()
        if not name:
            return self._refuse("commit_edit", "name is empty")
        self._records.commit_name(slot.target_index, name)
        self._slot = None
        self._notify("created" if slot.is_speculative else "renamed")
        return True

    def cancel_edit(self) -> bool:
        slot = self._slot
        if slot is None:
            return self._refuse("cancel_edit", "no edit in progress")
        self._slot = None
        if slot.is_speculative:
            self._records.discard(slot.target_index)
            self._selection = slot.restore_selection
        self._selection = self._clamp(self._selection)
        return True

    def delete_selected(self) -> bool:
        if self._slot is not None:
            return self._refuse("delete_selected", "an edit is in progress")
        index = self._selection
        if index is None or not len(self._records):
            return self._refuse("delete_selected", "the list is empty")
        self._records.remove(index)
        # same numeric index now points at the following row, or the new last row
        self._selection = self._clamp(index)
        self._notify("deleted")
        return True

    def reload(self) -> None:
        """Re-read rows from the backing storage after an outside change."""
        if self._slot is not None:
            self.cancel_edit()
        self._records.refresh()
        self._selection = self._clamp(self._selection)

    # -----------------------
    # Edit buffer
    # -----------------------

    def type_text(self, text: str) -> bool:
        if self._slot is None:
            return self._refuse("type_text", "no edit in progress")
        self._slot.buffer = (self._slot.buffer + text)[:MAX_NAME_LENGTH]
        return True

    def backspace(self) -> bool:
        if self._slot is None:
            return self._refuse("backspace", "no edit in progress")
        self._slot.buffer = self._slot.buffer[:-1]
        return True

    def clear_buffer(self) -> bool:
        if self._slot is None:
            return self._refuse("clear_buffer", "no edit in progress")
        self._slot.buffer = ""
        return True

    # -----------------------
    # Command routing
    # -----------------------

    def handle(self, command: Command) -> bool:
        """Apply a command. Returns False when the command is left for the parent."""
        if self._slot is not None:
            if command.kind == "select":
                self.commit_edit()
            elif command.kind in ("cancel", "back"):
                self.cancel_edit()
            elif command.kind == "text":
                self.type_text(command.text)
            elif command.kind == "backspace":
                self.backspace()
            elif command.kind == "clear":
                self.clear_buffer()
            # the focused buffer swallows everything else
            return True

        if command.kind == "new":
            return self.start_create()
        if command.kind == "edit":
            return self.start_edit()
        if command.kind == "delete":
            return self.delete_selected()
        if command.kind == "up":
            return self.move(-1)
        if command.kind == "down":
            return self.move(1)
        return False

    def view(self) -> ListView:
        """Return the current render state."""
        slot = self._slot
        rows: List[ListRowView] = []
        for index in range(len(self._records)):
            is_editing = slot is not None and slot.target_index == index
            label = slot.buffer if is_editing and slot is not None else self._records.name_at(index)
            rows.append(
                ListRowView(
                    label=label,
                    is_selected=index == self._selection,
                    is_editing=is_editing,
                    is_new=is_editing and slot is not None and slot.is_speculative,
                )
            )
        return ListView(
            title=self._title,
            rows=tuple(rows),
            selected_index=self._selection,
            is_editing=slot is not None,
            buffer=slot.buffer if slot is not None else "",
            empty_hint=self._empty_hint,
        )

    def _clamp(self, index: int | None) -> int | None:
        length = len(self._records)
        if length == 0:
            return None
        if index is None:
            return 0
        return max(0, min(index, length - 1))

    def _notify(self, change: ListChange) -> None:
        logger.debug("%s list: record %s", self._title, change)
        if self._on_change is not None:
            self._on_change(change)

    def _refuse(self, operation: str, reason: str) -> bool:
        logger.debug("%s list: %s refused (%s)", self._title, operation, reason)
        return False
