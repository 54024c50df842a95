"""Application loop: rendering, event dispatch and view management."""

from __future__ import annotations

import os
import signal
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from fjira.colors import default_style, load_color_scheme
from fjira.spinner import Spinner
from fjira.terminal import (
    CursesScreen,
    Drawable,
    Event,
    Key,
    KeyEvent,
    KeyListener,
    Resizable,
    ResizeEvent,
    Screen,
    SimulationScreen,
    System,
)

FPS = 30
FRAME_SECONDS = 1 / FPS
DEFAULT_LOADING_TEXT = "Fetching"


@dataclass
class _Session:
    last_viewed_board_id: int = 0


_session = _Session()
_instance: Optional["App"] = None
_instance_lock = threading.Lock()


def set_last_viewed_board_id(board_id: int) -> None:
    """Remember a board id to be reported when the application closes."""
    _session.last_viewed_board_id = board_id


class App:
    """Owns the screen, the render loop and the registered components."""

    def __init__(self, screen: Screen) -> None:
        if os.environ.get("TERM") == "cygwin":
            os.environ["TERM"] = ""
        load_color_scheme()
        screen.init()
        self.style = default_style()
        screen.set_style(self.style)
        screen.enable_mouse()
        screen.enable_paste()
        screen.clear()
        self.screen = screen
        self.screen_x, self.screen_y = screen.size()
        self._spinner = Spinner()
        self._drawables: list[Any] = []
        self._flashes: list[Any] = []
        self._systems: list[Any] = []
        # keep-alive components survive clear_now(); keyed by identity
        self._keep_alive: dict[int, Any] = {}
        self._pending: list[Callable[[], None]] = []
        self._lock = threading.RLock()
        self._view_lock = threading.RLock()
        self._quit = False
        self._dirty = True
        self._loading = False
        self._closed = False
        self._view: Any = None

    # -- state -----------------------------------------------------------

    @property
    def is_quit(self) -> bool:
        return self._quit

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def current_view(self) -> Any:
        return self._view

    @property
    def drawables(self) -> list[Any]:
        with self._lock:
            return list(self._drawables)

    @property
    def systems(self) -> list[Any]:
        with self._lock:
            return list(self._systems)

    @property
    def flashes(self) -> list[Any]:
        with self._lock:
            return list(self._flashes)

    @property
    def spinner(self) -> Spinner:
        return self._spinner

    def is_kept_alive(self, component: Any) -> bool:
        with self._lock:
            return id(component) in self._keep_alive

    # -- main loop -------------------------------------------------------

    def start(self) -> None:
        """Run the render loop until quit() is called, then close the screen."""
        threading.Thread(target=self.process_terminal_events, daemon=True).start()
        previous_handlers = self._install_signal_handlers()
        try:
            while not self._quit:
                self.render()
                funcs = self._take_pending()
                if not funcs:
                    time.sleep(FRAME_SECONDS)
                    continue
                for func in reversed(funcs):
                    func()
        finally:
            for sig, handler in previous_handlers.items():
                signal.signal(sig, handler if handler is not None else signal.SIG_DFL)
            self.close()

    def render(self) -> None:
        self.screen.show()
        for system in self.systems:
            system.update()
        if not self._dirty and not self._loading:
            time.sleep(FRAME_SECONDS)
            return
        self.screen.fill(" ", self.style)
        if self._loading:
            self._spinner.draw(self.screen)
        for drawable in self.drawables:
            drawable.draw(self.screen)
        for flash in self.flashes:
            flash.draw(self.screen)
        self._dirty = False

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.screen.disable_mouse()
        self.screen.fill(" ", self.style)
        self.screen.show()
        self.screen.fini()
        if _session.last_viewed_board_id != 0:
            print(f"Last viewed board id: {_session.last_viewed_board_id}")

    def set_loading(self, flag: bool, text: Optional[str] = None) -> None:
        """Show or hide the spinner; without text it reads 'Fetching' and redraws."""
        if text is None:
            self._spinner.text = DEFAULT_LOADING_TEXT
            self._loading = flag
            self._mark_dirty()
            return
        self._spinner.text = text
        self._loading = flag

    def quit(self) -> None:
        self._quit = True

    # -- components ------------------------------------------------------

    def set_view(self, view: Any) -> None:
        with self._view_lock:
            self._mark_dirty()
            old = self._view
            if old is not None:
                old.destroy()
                self.un_keep_alive(old)
                self.remove_drawable(old)
                self.remove_system(old)
            self._view = view
            self.clear_now()
            self.add_drawable(view)
            self.add_system(view)
            self.keep_alive(view)
            view.init()

    def keep_alive(self, component: Any) -> None:
        with self._lock:
            self._keep_alive[id(component)] = component

    def un_keep_alive(self, component: Any) -> None:
        with self._lock:
            self._keep_alive.pop(id(component), None)

    def add_drawable(self, drawable: Drawable) -> None:
        with self._lock:
            self._drawables.append(drawable)
        if isinstance(drawable, Resizable):
            drawable.resize(self.screen_x, self.screen_y)

    def remove_drawable(self, drawable: Drawable) -> None:
        if self.is_kept_alive(drawable):
            return
        with self._lock:
            _remove_by_identity(self._drawables, drawable)

    def add_flash(self, flash: Drawable, duration: float) -> None:
        """Show a drawable on top of everything for duration seconds."""
        with self._lock:
            self._flashes.append(flash)
        if isinstance(flash, Resizable):
            flash.resize(self.screen_x, self.screen_y)
        self._mark_dirty()
        timer = threading.Timer(duration, self._clear_flashes)
        timer.daemon = True
        timer.start()

    def add_system(self, system: System) -> None:
        with self._lock:
            self._systems.append(system)

    def remove_system(self, system: System) -> None:
        if self.is_kept_alive(system):
            return
        with self._lock:
            _remove_by_identity(self._systems, system)

    def last_drawable(self) -> Optional[Drawable]:
        with self._lock:
            return self._drawables[-1] if self._drawables else None

    def set_dirty(self) -> None:
        self._dirty = True

    def clear_now(self) -> None:
        self._mark_dirty()
        self._clear()
        self.screen.fill(" ", self.style)
        self.screen.hide_cursor()

    def run_on_app_routine(self, func: Callable[[], None]) -> None:
        with self._lock:
            self._pending.append(func)

    # -- events ----------------------------------------------------------

    def handle_event(self, event: Event) -> None:
        if isinstance(event, ResizeEvent):
            self._mark_dirty()
            self.screen.sync()
            self.screen_x, self.screen_y = self.screen.size()
            for drawable in self.drawables:
                if isinstance(drawable, Resizable):
                    drawable.resize(self.screen_x, self.screen_y)
        elif isinstance(event, KeyEvent):
            self._mark_dirty()
            if event.key == Key.CTRL_C:
                self.quit()
                return
            systems = self.systems
            if not systems and event.key == Key.ESCAPE:
                self._quit = True
            for system in systems:
                if isinstance(system, KeyListener):
                    system.handle_key_event(event)

    def process_terminal_events(self) -> None:
        try:
            while not self._quit:
                event = self.screen.poll_event()
                if event is None:
                    if self._closed:
                        return
                    continue
                self.handle_event(event)
        except BaseException:
            self.close()
            raise

    # -- internals -------------------------------------------------------

    def _mark_dirty(self) -> None:
        self._dirty = True
        self.run_on_app_routine(self.set_dirty)

    def _take_pending(self) -> list[Callable[[], None]]:
        with self._lock:
            funcs, self._pending = self._pending, []
        return funcs

    def _clear_flashes(self) -> None:
        with self._lock:
            self._flashes = []
        self._mark_dirty()

    def _clear(self) -> None:
        with self._lock:
            self._drawables = []
            self._systems = []
            kept = list(self._keep_alive.values())
            for component in kept:
                if isinstance(component, System):
                    self.add_system(component)
                if isinstance(component, Drawable):
                    self.add_drawable(component)

    def _on_signal(self, signum, frame) -> None:
        self._quit = True

    def _install_signal_handlers(self) -> dict:
        if threading.current_thread() is not threading.main_thread():
            return {}
        previous = {}
        for name in ("SIGHUP", "SIGTERM", "SIGQUIT", "SIGINT"):
            sig = getattr(signal, name, None)
            if sig is None:
                continue
            try:
                previous[sig] = signal.signal(sig, self._on_signal)
            except (ValueError, OSError):
                continue
        return previous


def _remove_by_identity(items: list[Any], target: Any) -> None:
    for i, item in enumerate(items):
        if item is target:
            del items[i]
            return


def create_new_app() -> App:
    """Return the shared application, creating it on a terminal screen if needed."""
    global _instance
    with _instance_lock:
        if _instance is None:
            _instance = App(CursesScreen())
    return _instance


def create_new_app_with_screen(screen: Screen) -> App:
    """Create a new shared application drawing to the given screen."""
    global _instance
    app = App(screen)
    with _instance_lock:
        _instance = app
    return app


def get_app() -> Optional[App]:
    return _instance


def init_test_app(screen: Optional[Screen] = None) -> App:
    """Create the shared application on a simulation screen."""
    if screen is None:
        screen = SimulationScreen()
    return create_new_app_with_screen(screen)