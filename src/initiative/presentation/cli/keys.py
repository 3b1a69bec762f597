"""Translation of typed input lines into logical commands."""
from __future__ import annotations

from typing import Dict, List

from initiative.core.types import CommandKind
from initiative.services.controllers import Command

NAVIGATION_KEYS: Dict[str, CommandKind] = {
    "n": "new",
    "e": "edit",
    "d": "delete",
    "s": "save",
    "q": "quit",
    "b": "back",
    "esc": "back",
    "c": "cancel",
    "tab": "next_tab",
    "]": "next_tab",
    "btab": "prev_tab",
    "[": "prev_tab",
    "j": "down",
    "down": "down",
    "k": "up",
    "up": "up",
    "space": "toggle",
    "r": "roll",
    "x": "stop",
    "?": "help",
}

# control sequences cannot collide with a typed name
CONTROL_KEYS: Dict[str, CommandKind] = {
    "^[": "cancel",
    "^u": "clear",
    "^h": "backspace",
    "^k": "up",
    "^j": "down",
    "^t": "toggle",
    "^r": "roll",
    "^n": "new",
    "^s": "save",
    "^q": "quit",
}

# plain words, understood only by the participant form
FORM_KEYS: Dict[str, CommandKind] = {
    "esc": "cancel",
    "up": "up",
    "down": "down",
    "space": "toggle",
}

_SHORT_HELP = "n: new | e: edit | d: delete | enter: open | j/k: move | tab/btab: tabs | esc: back | q: quit | ?: help"
_FULL_HELP = (
    "n      new game, character, NPC or encounter",
    "e      rename the selected row",
    "d      delete the selected row",
    "enter  open the selected game / rename a roster row",
    "j k    move down / up (during an encounter: next / previous turn)",
    "tab    next tab, btab previous tab",
    "x      stop the running encounter",
    "esc    back to the game list",
    "s      save now",
    "q      quit",
    "?      hide this help",
)
_TEXT_HELP = "type text | enter: confirm | ^[: cancel | ^h: backspace | ^u: clear | ^s: save | ^q: quit"
_FORM_HELP = "type text | enter: start | esc: cancel | up/down | space: toggle | ^r: roll | ^n: monster | ^h: backspace"


def translate(line: str, *, text_focus: bool, form_focus: bool = False) -> List[Command]:
    """
    Map one input line to commands.

    Outside text focus the line is split into key names, so ``j j`` moves down
    twice; an empty line selects. In text focus only control sequences (and,
    in the participant form, the plain words ``esc``/``up``/``down``/``space``)
    are commands when they make up the whole line; anything else is typed.
    """
    raw = line.rstrip("\r\n")
    key = raw.strip()
    if not key:
        return [Command("select")]
    if text_focus:
        kind = CONTROL_KEYS.get(key.lower())
        if kind is None and form_focus:
            kind = FORM_KEYS.get(key)
        if kind is not None:
            return [Command(kind)]
        return [Command.typed(raw)]
    commands: List[Command] = []
    for token in key.lower().split():
        kind = NAVIGATION_KEYS.get(token)
        if kind is not None:
            commands.append(Command(kind))
    return commands


def help_line(*, text_focus: bool, form_focus: bool = False, full: bool = False) -> str:
    """Key reminder for the prompt; ``full`` expands the navigation help."""
    if form_focus:
        return _FORM_HELP
    if text_focus:
        return _TEXT_HELP
    if full:
        return "\n".join(_FULL_HELP)
    return _SHORT_HELP
