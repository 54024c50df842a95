"""Terminal primitives: keys, events, styles, screens and component protocols."""

from __future__ import annotations

import queue
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Optional, Protocol, Union, runtime_checkable

DEFAULT_COLOR = -1

_NAMED_COLORS = {
    "black": 0x000000,
    "maroon": 0x800000,
    "green": 0x008000,
    "olive": 0x808000,
    "navy": 0x000080,
    "purple": 0x800080,
    "teal": 0x008080,
    "silver": 0xC0C0C0,
    "gray": 0x808080,
    "grey": 0x808080,
    "red": 0xFF0000,
    "lime": 0x00FF00,
    "yellow": 0xFFFF00,
    "blue": 0x0000FF,
    "fuchsia": 0xFF00FF,
    "aqua": 0x00FFFF,
    "white": 0xFFFFFF,
}


def parse_color(name: str) -> int:
    """Return the 24-bit RGB value of a '#rrggbb' string or colour name, or -1."""
    name = name.strip().lower()
    if name.startswith("#"):
        try:
            return int(name[1:], 16) & 0xFFFFFF
        except ValueError:
            return DEFAULT_COLOR
    return _NAMED_COLORS.get(name, DEFAULT_COLOR)


class Key(Enum):
    RUNE = auto()
    ENTER = auto()
    ESCAPE = auto()
    BACKSPACE = auto()
    BACKSPACE2 = auto()
    TAB = auto()
    BACKTAB = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    PGUP = auto()
    PGDN = auto()
    CTRL_C = auto()
    ACK = auto()


@dataclass(frozen=True)
class KeyEvent:
    key: Key = Key.RUNE
    rune: str = ""
    modifiers: int = 0


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


Event = Union[KeyEvent, ResizeEvent]


@dataclass(frozen=True)
class Style:
    foreground: int = DEFAULT_COLOR
    background: int = DEFAULT_COLOR
    bold: bool = False
    italic: bool = False
    underline: bool = False
    blink: bool = False

    def with_foreground(self, color: int) -> "Style":
        return replace(self, foreground=color)

    def with_background(self, color: int) -> "Style":
        return replace(self, background=color)

    def with_bold(self, flag: bool) -> "Style":
        return replace(self, bold=flag)

    def with_italic(self, flag: bool) -> "Style":
        return replace(self, italic=flag)

    def with_underline(self, flag: bool) -> "Style":
        return replace(self, underline=flag)

    def with_blink(self, flag: bool) -> "Style":
        return replace(self, blink=flag)


class Screen(ABC):
    """A character grid that can be drawn to and polled for events."""

    def __init__(self) -> None:
        self.style = Style()
        self.cursor: Optional[tuple[int, int]] = None
        self.mouse_enabled = False
        self.paste_enabled = False

    @abstractmethod
    def init(self) -> None: ...

    @abstractmethod
    def fini(self) -> None: ...

    @abstractmethod
    def size(self) -> tuple[int, int]: ...

    @abstractmethod
    def set_content(self, x: int, y: int, char: str, style: Style) -> None: ...

    @abstractmethod
    def show(self) -> None: ...

    @abstractmethod
    def poll_event(self) -> Optional[Event]: ...

    def fill(self, char: str, style: Style) -> None:
        width, height = self.size()
        for y in range(height):
            for x in range(width):
                self.set_content(x, y, char, style)

    def clear(self) -> None:
        self.fill(" ", self.style)

    def sync(self) -> None:
        self.show()

    def show_cursor(self, x: int, y: int) -> None:
        self.cursor = (x, y)

    def hide_cursor(self) -> None:
        self.cursor = None

    def set_style(self, style: Style) -> None:
        self.style = style

    def enable_mouse(self) -> None:
        self.mouse_enabled = True

    def disable_mouse(self) -> None:
        self.mouse_enabled = False

    def enable_paste(self) -> None:
        self.paste_enabled = True


class SimulationScreen(Screen):
    """An in-memory screen for tests and headless use."""

    def __init__(self, width: int = 80, height: int = 25) -> None:
        super().__init__()
        self._width = width
        self._height = height
        self._cells: list[list[tuple[str, Style]]] = []
        self._events: "queue.Queue[Optional[Event]]" = queue.Queue()
        self._lock = threading.Lock()
        self._reset_cells()

    def _reset_cells(self) -> None:
        self._cells = [[(" ", self.style) for _ in range(self._width)] for _ in range(self._height)]

    def init(self) -> None:
        self._reset_cells()

    def fini(self) -> None:
        self._events.put(None)

    def size(self) -> tuple[int, int]:
        return self._width, self._height

    def set_content(self, x: int, y: int, char: str, style: Style) -> None:
        if 0 <= x < self._width and 0 <= y < self._height:
            with self._lock:
                self._cells[y][x] = (char, style)

    def show(self) -> None:
        """Nothing to flush: contents are always current."""

    def poll_event(self) -> Optional[Event]:
        return self._events.get()

    def inject_key(self, key: Key, rune: str = "", modifiers: int = 0) -> None:
        self._events.put(KeyEvent(key, rune, modifiers))

    def get_contents(self) -> tuple[list[tuple[str, Style]], int, int]:
        with self._lock:
            flat = [cell for row in self._cells for cell in row]
        return flat, self._width, self._height

    def text(self) -> str:
        with self._lock:
            return "\n".join("".join(char for char, _ in row) for row in self._cells)


class CursesScreen(Screen):
    """A screen backed by the curses library."""

    def __init__(self) -> None:
        super().__init__()
        self._stdscr = None

    def init(self) -> None:
        import curses

        self._stdscr = curses.initscr()
        curses.noecho()
        curses.raw()
        self._stdscr.keypad(True)
        try:
            curses.curs_set(0)
        except curses.error:
            pass

    def fini(self) -> None:
        import curses

        if self._stdscr is None:
            return
        self._stdscr.keypad(False)
        curses.noraw()
        curses.echo()
        curses.endwin()
        self._stdscr = None

    def size(self) -> tuple[int, int]:
        if self._stdscr is None:
            return 0, 0
        height, width = self._stdscr.getmaxyx()
        return width, height

    def _attrs(self, style: Style) -> int:
        import curses

        attrs = 0
        if style.bold:
            attrs |= curses.A_BOLD
        if style.underline:
            attrs |= curses.A_UNDERLINE
        if style.blink:
            attrs |= curses.A_BLINK
        if style.italic and hasattr(curses, "A_ITALIC"):
            attrs |= curses.A_ITALIC
        return attrs

    def set_content(self, x: int, y: int, char: str, style: Style) -> None:
        import curses

        if self._stdscr is None or x < 0 or y < 0:
            return
        try:
            self._stdscr.addstr(y, x, char, self._attrs(style))
        except curses.error:
            pass

    def show(self) -> None:
        import curses

        if self._stdscr is None:
            return
        if self.cursor is not None:
            try:
                curses.curs_set(1)
                self._stdscr.move(self.cursor[1], self.cursor[0])
            except curses.error:
                pass
        self._stdscr.refresh()

    def poll_event(self) -> Optional[Event]:
        import curses

        if self._stdscr is None:
            return None
        try:
            ch = self._stdscr.get_wch()
        except curses.error:
            return None
        if isinstance(ch, int):
            if ch == curses.KEY_RESIZE:
                width, height = self.size()
                return ResizeEvent(width, height)
            mapping = {
                curses.KEY_UP: Key.UP,
                curses.KEY_DOWN: Key.DOWN,
                curses.KEY_LEFT: Key.LEFT,
                curses.KEY_RIGHT: Key.RIGHT,
                curses.KEY_PPAGE: Key.PGUP,
                curses.KEY_NPAGE: Key.PGDN,
                curses.KEY_BACKSPACE: Key.BACKSPACE2,
                curses.KEY_ENTER: Key.ENTER,
                curses.KEY_BTAB: Key.BACKTAB,
            }
            key = mapping.get(ch)
            return KeyEvent(key) if key is not None else None
        controls = {
            "\x1b": Key.ESCAPE,
            "\n": Key.ENTER,
            "\r": Key.ENTER,
            "\x7f": Key.BACKSPACE2,
            "\x08": Key.BACKSPACE,
            "\t": Key.TAB,
            "\x03": Key.CTRL_C,
            "\x06": Key.ACK,
        }
        if ch in controls:
            return KeyEvent(controls[ch])
        return KeyEvent(Key.RUNE, ch)


@runtime_checkable
class Drawable(Protocol):
    def draw(self, screen: Screen) -> None: ...


@runtime_checkable
class Resizable(Protocol):
    def resize(self, screen_x: int, screen_y: int) -> None: ...


@runtime_checkable
class System(Protocol):
    def update(self) -> None: ...


@runtime_checkable
class KeyListener(Protocol):
    def handle_key_event(self, event: KeyEvent) -> None: ...


@runtime_checkable
class View(Protocol):
    def init(self) -> None: ...

    def destroy(self) -> None: ...