import threading
import time

import pytest

from fjira.app import (
    App,
    create_new_app,
    create_new_app_with_screen,
    get_app,
    init_test_app,
    set_last_viewed_board_id,
)
from fjira.terminal import Key, KeyEvent, ResizeEvent, SimulationScreen, Style
from fjira.text import Text


class _Recorder:
    def __init__(self):
        self.sizes = []
        self.events = []
        self.updates = 0
        self.draws = 0

    def draw(self, screen):
        self.draws += 1

    def resize(self, screen_x, screen_y):
        self.sizes.append((screen_x, screen_y))

    def update(self):
        self.updates += 1

    def handle_key_event(self, event):
        self.events.append(event)


class _View:
    def __init__(self):
        self.initialised = False
        self.destroyed = False

    def init(self):
        self.initialised = True

    def destroy(self):
        self.destroyed = True

    def draw(self, screen):
        pass

    def update(self):
        pass


def _wait_for(predicate, timeout=2.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


def test_start_and_quit():
    app = App(SimulationScreen())
    thread = threading.Thread(target=app.start, daemon=True)
    thread.start()
    time.sleep(0.1)
    app.quit()
    thread.join(2)
    assert app.is_quit
    assert not thread.is_alive()
    assert app.is_closed


def test_keep_alive():
    app = App(SimulationScreen())
    drawable = Text(0, 0, Style(), "test")
    app.add_drawable(drawable)
    app.keep_alive(drawable)
    assert app.is_kept_alive(drawable) is True
    app.un_keep_alive(drawable)
    assert app.is_kept_alive(drawable) is False


@pytest.mark.parametrize("key, expected_quit", [(Key.ENTER, False), (Key.ESCAPE, True)])
def test_process_terminal_events(key, expected_quit):
    screen = SimulationScreen()
    app = App(screen)
    thread = threading.Thread(target=app.start, daemon=True)
    thread.start()
    time.sleep(0.1)
    screen.inject_key(key, "a")
    time.sleep(0.2)
    assert app.is_quit == expected_quit
    app.quit()
    thread.join(2)
    assert not thread.is_alive()


def test_ctrl_c_quits_even_with_systems():
    app = App(SimulationScreen())
    app.add_system(_Recorder())
    app.handle_event(KeyEvent(Key.CTRL_C))
    assert app.is_quit


def test_escape_goes_to_systems_when_present():
    app = App(SimulationScreen())
    listener = _Recorder()
    app.add_system(listener)
    app.handle_event(KeyEvent(Key.ESCAPE))
    assert not app.is_quit
    assert listener.events == [KeyEvent(Key.ESCAPE)]


def test_resize_event_resizes_drawables():
    app = App(SimulationScreen(40, 10))
    recorder = _Recorder()
    app.add_drawable(recorder)
    app.handle_event(ResizeEvent(40, 10))
    assert recorder.sizes == [(40, 10), (40, 10)]
    assert (app.screen_x, app.screen_y) == (40, 10)


def test_render_draws_drawables():
    screen = SimulationScreen()
    app = App(screen)
    app.add_drawable(Text(3, 2, Style(), "hello"))
    app.render()
    assert "hello" in screen.text()


def test_render_loading_draws_spinner_text():
    screen = SimulationScreen()
    app = App(screen)
    app.set_loading(True)
    assert app.is_loading
    app.render()
    assert "Fetching" in screen.text()
    app.set_loading(False, "Other")
    assert not app.is_loading
    assert app.spinner.text == "Other"


def test_set_view_replaces_previous_view():
    app = App(SimulationScreen())
    first, second = _View(), _View()
    app.set_view(first)
    assert first.initialised
    assert app.current_view is first
    app.set_view(second)
    assert first.destroyed
    assert app.current_view is second
    assert all(d is not first for d in app.drawables)
    assert any(d is second for d in app.drawables)
    assert any(s is second for s in app.systems)


def test_clear_now_keeps_kept_alive_components():
    app = App(SimulationScreen())
    kept, dropped = _Recorder(), _Recorder()
    app.add_drawable(kept)
    app.add_drawable(dropped)
    app.keep_alive(kept)
    app.clear_now()
    assert app.drawables == [kept]
    assert app.systems == [kept]


def test_remove_drawable_respects_keep_alive():
    app = App(SimulationScreen())
    kept = Text(0, 0, Style(), "a")
    other = Text(0, 0, Style(), "b")
    app.add_drawable(kept)
    app.add_drawable(other)
    app.keep_alive(kept)
    app.remove_drawable(kept)
    app.remove_drawable(other)
    assert app.drawables == [kept]
    assert app.last_drawable() is kept


def test_last_drawable_empty():
    app = App(SimulationScreen())
    assert app.last_drawable() is None


def test_remove_system():
    app = App(SimulationScreen())
    system = _Recorder()
    app.add_system(system)
    app.remove_system(system)
    assert app.systems == []


def test_run_on_app_routine_executed_by_loop():
    app = App(SimulationScreen())
    done = threading.Event()
    app.run_on_app_routine(done.set)
    thread = threading.Thread(target=app.start, daemon=True)
    thread.start()
    assert done.wait(2)
    app.quit()
    thread.join(2)
    assert not thread.is_alive()


def test_add_flash_is_cleared_after_duration():
    app = App(SimulationScreen())
    flash = Text(0, 0, Style(), "flash")
    app.add_flash(flash, 0.05)
    assert app.flashes == [flash]
    assert _wait_for(lambda: app.flashes == [])


def test_close_reports_last_viewed_board(capsys):
    app = App(SimulationScreen())
    set_last_viewed_board_id(7)
    try:
        app.close()
        app.close()
    finally:
        set_last_viewed_board_id(0)
    out = capsys.readouterr().out
    assert out.count("Last viewed board id: 7") == 1


def test_singletons():
    screen = SimulationScreen()
    app = create_new_app_with_screen(screen)
    assert get_app() is app
    assert create_new_app() is app
    test_app = init_test_app()
    assert get_app() is test_app
    assert test_app is not app