"""A static piece of text on screen."""

from __future__ import annotations

from fjira.terminal import Screen, Style


class Text:
    def __init__(self, x: int, y: int, style: Style, text: str) -> None:
        self.x = x
        self.y = y
        self.style = style
        self.text = text

    def draw(self, screen: Screen) -> None:
        row, col = self.y, self.x
        for ch in self.text:
            if ch == "\n":
                row += 1
                col = self.x
                continue
            screen.set_content(col, row, ch, self.style)
            col += 1

    def change_text(self, new_text: str) -> None:
        self.text = new_text