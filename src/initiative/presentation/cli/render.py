"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import List

from initiative.presentation.cli.config import debug_enabled
from initiative.services.controllers import (
    AppView,
    EncounterView,
    GameDetailView,
    ListView,
    ParticipantFormView,
    PlaceholderView,
)

_CURSOR = ">"


def format_heading(title: str) -> str:
    return f"=== {title} ==="


def format_list(view: ListView) -> List[str]:
    """Format a list editor, marking the cursor and the row being edited."""
    lines = [format_heading(view.title)]
    if not view.rows:
        lines.append(f"  {view.empty_hint}" if view.empty_hint else "  (empty)")
        return lines
    for row in view.rows:
        marker = _CURSOR if row.is_selected else " "
        if row.is_editing:
            label = f"[{row.label}_]"
            if row.is_new:
                label += " (new)"
        else:
            label = row.label
        lines.append(f"{marker} {label}")
    return lines


def format_tab_bar(titles: tuple[str, ...], active: int) -> str:
    return " ".join(f"[{title}]" if index == active else f" {title} " for index, title in enumerate(titles))


def format_participant_form(view: ParticipantFormView) -> List[str]:
    marker = _CURSOR if view.summary_focused else " "
    lines = [f"{marker} Summary: {view.summary}_" if view.summary_focused else f"{marker} Summary: {view.summary}"]
    for row in view.rows:
        marker = _CURSOR if row.is_focused else " "
        check = "x" if row.selected else " "
        initiative = row.initiative_text or "--"
        lines.append(f"{marker} [{check}] {row.name:<24} {row.kind:<9} init {initiative}")
    if view.error:
        lines.append(f"! {view.error}")
    return lines


def format_encounter(view: EncounterView, *, debug: bool = False) -> List[str]:
    if view.phase == "collecting" and view.form is not None:
        return ["New encounter", *format_participant_form(view.form)]
    if view.phase == "active":
        lines = [f"{view.summary or 'Encounter'} | Round {view.round}"]
        for group in view.groups:
            marker = _CURSOR if group.is_current else " "
            lines.append(f"{marker} {group.initiative:>3}  {', '.join(group.names)}")
        return lines
    lines = ["No encounter running. Press n to start one."]
    if view.notice:
        lines.append(f"! {view.notice}")
    if debug:
        lines.append(f"[debug] phase={view.phase}")
    return lines


def format_detail(view: GameDetailView, *, debug: bool = False) -> List[str]:
    lines = [format_heading(view.game_name), format_tab_bar(view.tab_titles, view.active_tab)]
    body = view.body
    if isinstance(body, EncounterView):
        lines.extend(format_encounter(body, debug=debug))
    elif isinstance(body, ListView):
        lines.extend(format_list(body)[1:])
    elif isinstance(body, PlaceholderView):
        lines.append(body.message)
    return lines


def format_app(view: AppView, *, debug: bool = False) -> List[str]:
    """Return the full screen for the current application state."""
    if view.mode == "game_detail" and view.detail is not None:
        lines = format_detail(view.detail, debug=debug)
    else:
        lines = format_list(view.game_list)
    if view.status:
        lines.append(f"* {view.status}")
    if debug:
        lines.append(f"[debug] mode={view.mode} text_focus={view.text_focus}")
    return lines


def render_app(view: AppView, *, debug: bool | None = None) -> None:
    """Print the current screen."""
    if debug is None:
        debug = debug_enabled()
    print()
    for line in format_app(view, debug=debug):
        print(line)
