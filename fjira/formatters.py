"""Display strings for boards and filters."""

from __future__ import annotations

from typing import Any, Iterable


def format_boards(boards: Iterable[Any]) -> list[str]:
    return [board.name for board in boards]


def format_filters(filters: Iterable[Any]) -> list[str]:
    return [item.name for item in filters]