"""Named screen registry with one step of history."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from fjira.app import get_app


@dataclass
class _History:
    screen_name: str = ""
    args: tuple = ()


_registry: dict[str, Callable[..., Any]] = {}
_current = _History()
_previous = _History()


def register_goto(name: str, func: Callable[..., Any]) -> None:
    _registry[name] = func


def go_to(name: str, *args: Any) -> None:
    """Run the screen registered under name; unknown names are ignored."""
    func = _registry.get(name)
    if func is None:
        return
    try:
        func(*args)
    except BaseException:
        app = get_app()
        if app is not None:
            app.close()
        raise
    _previous.screen_name = _current.screen_name
    _previous.args = _current.args
    _current.screen_name = name
    _current.args = args


def current_screen_name() -> str:
    return _current.screen_name


def previous_screen_name() -> str:
    return _previous.screen_name


def go_back() -> None:
    if _previous.screen_name:
        go_to(_previous.screen_name, *_previous.args)