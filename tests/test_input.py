import pytest

from ovpager.input import (
    Candidate,
    DelimiterEvent,
    GotoEvent,
    HeaderEvent,
    InputMode,
    JumpTargetEvent,
    LineInput,
    delimiter_candidate,
    goto_candidate,
    jump_target_candidate,
    rune_width,
    string_width,
)


def test_delimiter_candidate_defaults():
    assert delimiter_candidate().items == ["│", "\t", "|", ","]


def test_empty_candidates():
    assert goto_candidate().items == []
    assert jump_target_candidate().up() == ""
    assert jump_target_candidate().down() == ""


def test_candidate_up_wraps_to_last():
    c = delimiter_candidate()
    assert c.up() == ","
    assert c.up() == "|"


def test_candidate_down_cycles():
    c = delimiter_candidate()
    assert c.down() == "\t"
    assert c.down() == "|"
    assert c.down() == ","
    assert c.down() == "│"


def test_candidate_confirm_moves_to_last():
    c = Candidate(["a", "b"], p=1)
    c.confirm("a")
    assert c.items == ["b", "a"]
    assert c.p == 0


def test_candidate_confirm_new_value_appended():
    c = Candidate(["a"])
    c.confirm("z")
    assert c.items[-1] == "z"
    assert len(c.items) == 2


@pytest.mark.parametrize(
    "event,mode,prompt",
    [
        (DelimiterEvent(delimiter_candidate()), InputMode.DELIMITER, "Delimiter:"),
        (GotoEvent(goto_candidate()), InputMode.GOLINE, "Goto line:"),
        (HeaderEvent(), InputMode.HEADER, "Header length:"),
        (JumpTargetEvent(jump_target_candidate()), InputMode.JUMP_TARGET, "Jump Target line:"),
    ],
)
def test_event_mode_and_prompt(event, mode, prompt):
    assert event.mode == mode
    assert event.prompt == prompt


def test_event_confirm_records_history():
    cand = goto_candidate()
    ev = GotoEvent(cand)
    result = ev.confirm("42")
    assert result is ev
    assert ev.value == "42"
    assert cand.items == ["42"]


def test_header_up_down():
    ev = HeaderEvent()
    assert ev.up("3") == "4"
    assert ev.up("x") == "0"
    assert ev.down("5") == "4"
    assert ev.down("0") == "0"
    assert ev.down("bad") == "0"


def test_rune_width_ascii_matches_length():
    assert rune_width("abc") == len("abc")


def test_rune_width_tab():
    assert rune_width("\t") == 2


def test_string_width_ascii_invariant():
    text = "abcdef"
    for k in range(1, len(text) + 1):
        assert string_width(text, k) == k - 1
    assert string_width(text, len(text) + 5) == len(text)


def test_insert_builds_value():
    li = LineInput()
    li.reset(GotoEvent(goto_candidate()))
    for ch in "abc":
        li.insert(ch)
    assert li.value == "abc"
    assert li.cursor_x == rune_width("abc")


def test_left_then_insert():
    li = LineInput()
    li.insert("a")
    li.insert("b")
    li.left()
    li.insert("X")
    assert li.value == "aXb"


def test_backspace_removes_previous():
    li = LineInput()
    for ch in "ab":
        li.insert(ch)
    li.backspace()
    assert li.value == "a"
    assert li.cursor_x == rune_width("a")


def test_backspace_at_start_noop():
    li = LineInput(value="ab", cursor_x=0)
    li.backspace()
    assert li.value == "ab"


def test_delete_at_start_removes_first():
    li = LineInput(value="ab", cursor_x=0)
    li.delete()
    assert li.value == "b"


def test_delete_under_cursor():
    li = LineInput(value="abc", cursor_x=1)
    li.delete()
    assert li.value == "ac"


def test_right_moves_and_stops_at_end():
    li = LineInput(value="ab", cursor_x=0)
    li.right()
    assert li.cursor_x == rune_width("a")
    li.right()
    li.right()
    assert li.cursor_x == rune_width("ab")


def test_tab_insert():
    li = LineInput()
    li.tab()
    assert li.value == "\t"
    assert li.cursor_x == rune_width("\t")


def test_up_uses_candidate():
    li = LineInput()
    li.reset(DelimiterEvent(delimiter_candidate()))
    li.up()
    assert li.value == ","
    assert li.cursor_x == rune_width(",")


def test_up_in_normal_mode_noop():
    li = LineInput(value="x", cursor_x=1)
    li.up()
    li.down()
    assert li.value == "x"


def test_enter_confirms_and_returns_to_normal():
    cand = delimiter_candidate()
    li = LineInput()
    li.reset(DelimiterEvent(cand))
    assert li.mode == InputMode.DELIMITER
    li.insert(";")
    ev = li.enter()
    assert ev.value == ";"
    assert cand.items[-1] == ";"
    assert li.mode == InputMode.NORMAL


def test_enter_in_normal_mode_returns_none():
    assert LineInput().enter() is None


def test_reset_clears_text():
    li = LineInput(value="abc", cursor_x=3)
    li.reset(None)
    assert (li.value, li.cursor_x, li.mode) == ("", 0, InputMode.NORMAL)