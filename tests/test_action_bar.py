from fjira.action_bar import BOTTOM, LEFT, ActionBar, ActionBarItem, action_bar_label
from fjira.terminal import Key, KeyEvent, SimulationScreen


def test_add_remove_trim():
    ab = ActionBar(0, 1)
    ab.update()
    ab.add_text_item("id", "test")
    assert len(ab.items) == 1
    ab.remove_item_at_index(0)
    assert len(ab.items) == 0
    for name in ("id1", "id2", "id3", "id3"):
        ab.add_text_item(name, "test")
    ab.trim_items_to(2)
    assert len(ab.items) == 2
    ab.remove_item(ab.items[0].id)
    assert len(ab.items) == 1


def test_get_item_out_of_range():
    ab = ActionBar(BOTTOM, LEFT)
    assert ab.get_item(0) is None


def test_trigger_rune_and_upper_case():
    ab = ActionBar(BOTTOM, LEFT)
    ab.add_item(ActionBarItem(id=7, text1="quit", trigger_rune="q"))
    ab.handle_key_event(KeyEvent(Key.RUNE, "Q"))
    assert ab.actions.get_nowait() == 7


def test_trigger_key():
    ab = ActionBar(BOTTOM, LEFT)
    ab.add_item(ActionBarItem(id=3, text1="esc", trigger_key=Key.ESCAPE))
    ab.handle_key_event(KeyEvent(Key.ESCAPE))
    assert ab.actions.get_nowait() == 3


def test_draw_at_bottom():
    screen = SimulationScreen(40, 5)
    ab = ActionBar(BOTTOM, LEFT)
    ab.resize(40, 5)
    ab.add_text_item("a", "first")
    ab.add_text_item("b", "second")
    ab.draw(screen)
    assert screen.text().split("\n")[-1].startswith("first second")


def test_change_text2_and_label():
    item = ActionBarItem(id=1, text1="Key: ")
    item.change_text2("ABC-1")
    assert item.text2 == "ABC-1"
    assert action_bar_label("") == "-"
    assert action_bar_label("x") == "x"