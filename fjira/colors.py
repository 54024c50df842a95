"""Colour scheme loading from the user's colors.yml."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from fjira.terminal import Style, parse_color

_log = logging.getLogger(__name__)

_home_dir: Optional[Path] = None
_scheme: dict[str, Any] = {}
_colors: dict[str, int] = {}


def _pair(background: str, foreground: str) -> dict[str, str]:
    return {"background": background, "foreground": foreground}


_WHITE = "#FFFFFF"
_DARK = "#151515"
_ERROR_RED = "#8B0000"
_LIGHT_GREY = "#F5F5F5"

DEFAULT_SCHEME: dict[str, Any] = {
    "default": {
        "background": "#161616",
        "foreground": "#c7c7c7",
        "foreground2": _WHITE,
    },
    "finder": {
        "cursor": _ERROR_RED,
        "title": "#E9CE58",
        "match": "#90EE90",
        "highlight": {**_pair("#3A3A3A", _WHITE), "match": "#E0FFFF"},
    },
    "navigation": {
        "top": {"background": "#5F875f", "foreground1": _WHITE, "foreground2": _DARK},
        "bottom": {"background": "#5F87AF", "foreground1": _WHITE, "foreground2": _DARK},
    },
    "details": {"foreground": "#696969"},
    "boards": {
        "title": {"foreground": "#ecce58"},
        "headers": _pair("#5F875f", _WHITE),
        "column": _pair("#232323", "#ffffff"),
        "highlight": _pair("#6666ff", "#000000"),
        "selection": _pair(_ERROR_RED, "#ffffff"),
    },
    "spinner": {"accent": "#FF0000"},
    "alerts": {
        "success": _pair(_LIGHT_GREY, "#006400"),
        "error": _pair(_LIGHT_GREY, _ERROR_RED),
    },
}


def set_home_dir(path) -> None:
    """Override the user home directory."""
    global _home_dir
    _home_dir = Path(path)


def get_home_dir() -> Path:
    """Return the application directory, ``<home>/.fjira``."""
    home = _home_dir if _home_dir is not None else Path.home()
    return home / ".fjira"


def _parse_yaml(text: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        _log.error("cannot parse colour scheme: %s", exc)
        return {}
    return data if isinstance(data, dict) else {}


def _flatten(prefix: str, tree: dict[str, Any], target: dict[str, int]) -> None:
    for name, value in tree.items():
        key = f"{prefix}.{name}" if prefix else str(name)
        if isinstance(value, dict):
            _flatten(key, value, target)
        elif isinstance(value, str):
            target[key] = parse_color(value)


def load_color_scheme() -> dict[str, Any]:
    """Load colors.yml (or the built-in scheme) and merge it into the colour table."""
    global _scheme
    try:
        text = (get_home_dir() / "colors.yml").read_text(encoding="utf-8")
    except OSError:
        _scheme = DEFAULT_SCHEME
    else:
        _scheme = _parse_yaml(text)
    _flatten("", _scheme, _colors)
    return _scheme


def color(name: str) -> int:
    """Return the colour for a dotted key; raises KeyError if unknown."""
    if not _colors:
        load_color_scheme()
    try:
        return _colors[name]
    except KeyError:
        raise KeyError(f"unknown color {name}") from None


def default_style() -> Style:
    """Return the base style with the scheme's default foreground."""
    return Style().with_foreground(color("default.foreground"))