"""Loading spinner drawn in the bottom-right corner."""

from __future__ import annotations

from fjira.colors import color, default_style
from fjira.draw import draw_text
from fjira.terminal import Screen


class Spinner:
    def __init__(self) -> None:
        self.frames = [".....", "....", ".."]
        self.styles = [
            default_style(),
            default_style().with_foreground(color("spinner.accent")).with_bold(True),
            default_style(),
        ]
        self.text_style = default_style().with_italic(True).with_blink(True)
        self.text = ""
        self.index = 0

    def draw(self, screen: Screen) -> None:
        screen_x, screen_y = screen.size()
        self.index = (self.index + 1) % len(self.frames)
        frame = self.frames[self.index]
        row = screen_y - 1
        col = screen_x - len(frame) - 1
        if self.text:
            col -= len(self.text) + 1
            draw_text(screen, screen_x - 1 - len(self.text), screen_y - 1, self.text_style, self.text)
        for offset, ch in enumerate(frame):
            screen.set_content(col + offset, row, ch, self.styles[self.index])