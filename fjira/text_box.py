"""A bordered box holding one line of text."""

from __future__ import annotations

from fjira.colors import default_style
from fjira.draw import H_LINE, LL_CORNER, LR_CORNER, UL_CORNER, UR_CORNER, V_LINE, draw_text
from fjira.terminal import Screen, Style


class TextBox:
    def __init__(self, x: int, y: int, style: Style, border_style: Style, text: str) -> None:
        self.x = x
        self.y = y
        self.x2 = x + len(text) + 3
        self.y2 = y - 2
        self.text = text
        self.text_style = style
        self.border_style = border_style
        self.bg_style = default_style()

    def draw(self, screen: Screen) -> None:
        if self.y2 < self.y:
            self.y, self.y2 = self.y2, self.y
        if self.x2 < self.x:
            self.x, self.x2 = self.x2, self.x
        for row in range(self.y, self.y2 + 1):
            for col in range(self.x, self.x2 + 1):
                screen.set_content(col, row, " ", self.bg_style)
        for col in range(self.x, self.x2 + 1):
            screen.set_content(col, self.y, H_LINE, self.border_style)
            screen.set_content(col, self.y2, H_LINE, self.border_style)
        for row in range(self.y + 1, self.y2):
            screen.set_content(self.x, row, V_LINE, self.border_style)
            screen.set_content(self.x2, row, V_LINE, self.border_style)
        if self.y != self.y2 and self.x != self.x2:
            screen.set_content(self.x, self.y, UL_CORNER, self.border_style)
            screen.set_content(self.x2, self.y, UR_CORNER, self.border_style)
            screen.set_content(self.x, self.y2, LL_CORNER, self.border_style)
            screen.set_content(self.x2, self.y2, LR_CORNER, self.border_style)
        if self.text:
            draw_text(screen, self.x + 1, self.y + 1, self.text_style, " ")
            draw_text(screen, self.x + 2, self.y + 1, self.text_style, self.text)
            draw_text(screen, self.x2 - 1, self.y + 1, self.text_style, " ")

    def set_x(self, x: int) -> None:
        self.x = x
        self.x2 = x + len(self.text) + 3

    def set_y(self, y: int) -> None:
        self.y = y

    def set_text(self, text: str) -> None:
        self.text = text
        self.set_x(self.x)