from initiative.presentation.cli.keys import help_line, translate


def _kinds(line: str, *, text_focus: bool = False, form_focus: bool = False) -> list[str]:
    return [command.kind for command in translate(line, text_focus=text_focus, form_focus=form_focus)]


def test_empty_line_selects_in_both_modes() -> None:
    assert _kinds("") == ["select"]
    assert _kinds("   ", text_focus=True) == ["select"]


def test_navigation_keys_map_to_commands() -> None:
    assert _kinds("n") == ["new"]
    assert _kinds("tab") == ["next_tab"]
    assert _kinds("btab") == ["prev_tab"]
    assert _kinds("esc") == ["back"]
    assert _kinds("q") == ["quit"]
    assert _kinds("x") == ["stop"]


def test_multiple_keys_on_one_line() -> None:
    assert _kinds("j j k") == ["down", "down", "up"]


def test_unknown_keys_are_dropped() -> None:
    assert _kinds("zz") == []


def test_text_focus_types_the_line() -> None:
    commands = translate("Shandra", text_focus=True)
    assert [(c.kind, c.text) for c in commands] == [("text", "Shandra")]


def test_text_focus_keeps_letters_that_are_keys_elsewhere() -> None:
    assert _kinds("q", text_focus=True) == ["text"]


def test_text_focus_control_keys() -> None:
    assert _kinds("^[", text_focus=True) == ["cancel"]
    assert _kinds("^u", text_focus=True) == ["clear"]
    assert _kinds("^h", text_focus=True) == ["backspace"]
    assert _kinds("^R", text_focus=True) == ["roll"]
    assert _kinds("^q", text_focus=True) == ["quit"]


def test_names_that_look_like_keys_are_typed() -> None:
    for name in ("Up", "down", "Space", "esc"):
        commands = translate(name, text_focus=True)
        assert [(c.kind, c.text) for c in commands] == [("text", name)]


def test_participant_form_understands_plain_words() -> None:
    assert _kinds("esc", text_focus=True, form_focus=True) == ["cancel"]
    assert _kinds("up", text_focus=True, form_focus=True) == ["up"]
    assert _kinds("down", text_focus=True, form_focus=True) == ["down"]
    assert _kinds("space", text_focus=True, form_focus=True) == ["toggle"]
    assert _kinds("15", text_focus=True, form_focus=True) == ["text"]


def test_question_mark_requests_help() -> None:
    assert _kinds("?") == ["help"]
    assert _kinds("?", text_focus=True) == ["text"]


def test_help_line_short_and_full() -> None:
    short = help_line(text_focus=False)
    full = help_line(text_focus=False, full=True)
    assert "?: help" in short
    assert "\n" not in short
    assert len(full.splitlines()) > 5
    assert "hide this help" in full
    assert help_line(text_focus=True, full=True) != full
