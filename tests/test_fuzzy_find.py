import time

import pytest

from fjira.app import init_test_app
from fjira.fuzzy_find import FuzzyFind, FuzzyFindResult, find, new_fuzzy_find_with_provider
from fjira.terminal import Key, KeyEvent, SimulationScreen


def _type(finder, text):
    for ch in text:
        finder.handle_key_event(KeyEvent(Key.RUNE, ch))


@pytest.mark.parametrize(
    "records, query, want",
    [
        (["abc"], "abc", "abc"),
        (["Brzęczyszczykiewicz"], "c", "Brzęczyszczykiewicz"),
    ],
)
def test_draw_shows_results(records, query, want):
    screen = SimulationScreen()
    finder = FuzzyFind("test", records)
    _type(finder, query)
    finder.update()
    finder.resize(*screen.size())
    finder.draw(screen)
    assert finder.query == query
    assert want in screen.text()
    assert finder.fuzzy_status == "1/1"


@pytest.mark.parametrize(
    "keys, expected",
    [
        ([Key.UP, Key.UP, Key.UP, Key.DOWN], 2),
        ([Key.TAB, Key.TAB, Key.TAB, Key.BACKTAB], 2),
        ([Key.PGUP], 3),
        ([Key.PGUP, Key.PGDN], 0),
    ],
)
def test_handle_key_event_selection(keys, expected):
    init_test_app()
    finder = FuzzyFind("test", ["test1", "test2", "test3", "test4"])
    finder.handle_key_event(KeyEvent(Key.RUNE, "t"))
    finder.update()
    for key in keys:
        finder.handle_key_event(KeyEvent(key))
    assert finder.selected == expected


def test_enter_completes_with_selected_record():
    finder = FuzzyFind("test", ["alpha", "beta"])
    _type(finder, "be")
    finder.handle_key_event(KeyEvent(Key.ENTER))
    assert finder.complete.get(timeout=1) == FuzzyFindResult(1, "beta")


def test_enter_without_matches_completes_with_minus_one():
    finder = FuzzyFind("test", ["alpha"])
    _type(finder, "zz")
    finder.handle_key_event(KeyEvent(Key.ENTER))
    assert finder.complete.get(timeout=1) == FuzzyFindResult(-1, "")


def test_escape_cancels():
    finder = FuzzyFind("test", ["alpha"])
    finder.handle_key_event(KeyEvent(Key.ESCAPE))
    assert finder.complete.get(timeout=1) == FuzzyFindResult(-1, "")
    assert finder.query == ""


def test_backspace_removes_last_character():
    finder = FuzzyFind("test", ["alpha"])
    _type(finder, "alx")
    finder.handle_key_event(KeyEvent(Key.BACKSPACE2))
    finder.update()
    assert finder.query == "al"
    assert [m.text for m in finder.matches] == ["alpha"]


def test_non_writable_runes_are_ignored():
    finder = FuzzyFind("test", ["alpha"])
    _type(finder, "a#b")
    finder.update()
    assert finder.query == "ab"


def test_always_show_all_results():
    finder = FuzzyFind("test", ["abc", "xyz"])
    finder.always_show_all_results()
    _type(finder, "a")
    finder.update()
    assert [m.text for m in finder.matches] == ["abc", "xyz"]


def test_selected_item():
    finder = FuzzyFind("test", ["one", "two"])
    finder.update()
    finder.handle_key_event(KeyEvent(Key.UP))
    assert finder.selected_item == "two"
    assert FuzzyFind("empty", []).selected_item == ""


def test_provider_without_debounce():
    finder = new_fuzzy_find_with_provider("test", lambda q: [q + "1", q + "2"])
    finder.debounce_disabled = True
    finder.set_query("ab")
    finder.update()
    assert finder.records == ["ab1", "ab2"]
    assert finder.fuzzy_status == "2/2"


def test_provider_with_debounce():
    finder = new_fuzzy_find_with_provider("test", lambda q: [q + "1", q + "2"])
    finder.set_debounce(0.01)
    finder.set_query("x")
    finder.update()
    assert finder.matches == []
    deadline = time.monotonic() + 2
    while not finder.records and time.monotonic() < deadline:
        time.sleep(0.01)
    finder.update()
    assert finder.records == ["x1", "x2"]
    assert finder.fuzzy_status == "2/2"


def test_find_empty_pattern():
    assert find("", ["abc"]) == []


def test_find_is_case_insensitive_subsequence():
    matches = find("AC", ["abc", "xyz", "cab"])
    assert [m.text for m in matches] == ["abc"]
    assert matches[0].matched_indexes == [0, 2]
    assert matches[0].index == 0


def test_find_prefers_leading_adjacent_match():
    matches = find("ab", ["xxab", "ab"])
    assert [m.text for m in matches] == ["ab", "xxab"]
    assert matches[0].score > matches[1].score
    assert all(len(m.matched_indexes) == 2 for m in matches)