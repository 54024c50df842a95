"""Bars of labelled actions triggered by keys."""

from __future__ import annotations

import queue
from dataclasses import dataclass, field
from typing import Optional

from fjira.colors import default_style
from fjira.draw import draw_text
from fjira.terminal import Key, KeyEvent, Screen, Style

BOTTOM = -1
TOP = 1
LEFT = 1
RIGHT = -1
ACTION_BAR_MAX_ITEMS = 10
ACTION_BAR_ITEM_PADDING = 1
MESSAGE_LABEL_NONE = "-"


def action_bar_label(text: str) -> str:
    return text or MESSAGE_LABEL_NONE


@dataclass
class ActionBarItem:
    id: int
    text1: str = ""
    text2: str = ""
    text1_style: Style = field(default_factory=Style)
    text2_style: Style = field(default_factory=Style)
    trigger_rune: str = ""
    trigger_key: Optional[Key] = None
    _text: str = ""
    _x: int = 0
    _y: int = 0

    def change_text(self, text1: str, text2: str) -> None:
        self.text1 = text1
        self.text2 = text2
        self._text = text1 + text2

    def change_text2(self, text2: str) -> None:
        self.text2 = text2
        self._text = self.text1 + text2


class ActionBar:
    def __init__(self, v_align: int, h_align: int) -> None:
        self.actions: "queue.Queue[Optional[int]]" = queue.Queue()
        self.y = 0
        self._screen_x = 0
        self._screen_y = 0
        self.v_align = v_align
        self.h_align = h_align
        self.items: list[ActionBarItem] = []
        self.style = default_style()

    def add_text_item(self, item_id: str, text: str) -> None:
        self.add_item(ActionBarItem(id=len(self.items) + 1, text1=text))

    def add_item(self, item: ActionBarItem) -> None:
        item._text = item.text1 + item.text2
        self.items.append(item)
        self.resize(self._screen_x, self._screen_y)

    def add_item_with_styles(self, text1: str, text2: str, text1_style: Style, text2_style: Style) -> None:
        self.add_item(
            ActionBarItem(
                id=len(self.items) + 1,
                text1=text1,
                text2=text2,
                text1_style=text1_style,
                text2_style=text2_style,
            )
        )

    def get_item(self, index: int) -> Optional[ActionBarItem]:
        if 0 <= index < len(self.items):
            return self.items[index]
        return None

    def remove_item(self, item_id: int) -> None:
        for i, item in enumerate(self.items):
            if item.id == item_id:
                self.remove_item_at_index(i)
                return

    def remove_item_at_index(self, index: int) -> None:
        if index >= 0:
            del self.items[index]
            self.resize(self._screen_x, self._screen_y)

    def trim_items_to(self, index: int) -> None:
        if index > 0:
            del self.items[index:]
            self.resize(self._screen_x, self._screen_y)

    def clear(self) -> None:
        self.items = []
        self.resize(self._screen_x, self._screen_y)

    def draw(self, screen: Screen) -> None:
        for item in self.items:
            draw_text(screen, item._x, item._y, item.text1_style, item.text1)
            draw_text(screen, item._x + len(item.text1), item._y, item.text2_style, item.text2)
            draw_text(screen, item._x + len(item.text1) + len(item.text2), item._y, self.style, " ")

    def update(self) -> None:
        """Pick up the current colour scheme for the item separators."""
        self.style = default_style()

    def handle_key_event(self, event: KeyEvent) -> None:
        for item in self.items:
            if item.trigger_rune and (
                event.rune == item.trigger_rune or event.rune == chr(ord(item.trigger_rune) - 32)
            ):
                self.actions.put(item.id)
                return
            if item.trigger_key is not None and item.trigger_key == event.key:
                self.actions.put(item.id)
                return

    def resize(self, screen_x: int, screen_y: int) -> None:
        self._screen_x = screen_x
        self._screen_y = screen_y
        if self.v_align == BOTTOM:
            self.y = screen_y - 1
        elif self.v_align == TOP:
            self.y = 0
        for i, item in enumerate(self.items):
            item._x = self._next_item_x(i)
            item._y = self.y

    def destroy(self) -> None:
        self.actions.put(None)

    def _next_item_x(self, index: int) -> int:
        if index - 1 < 0:
            return self._screen_x if self.h_align == RIGHT else 0
        prev = self.items[index - 1]
        width = len(prev._text) + ACTION_BAR_ITEM_PADDING
        return prev._x - width if self.h_align == RIGHT else prev._x + width