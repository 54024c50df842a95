"""Yes/no question shown above the bottom line."""

from __future__ import annotations

import queue

from fjira.colors import color, default_style
from fjira.draw import draw_text
from fjira.terminal import Key, KeyEvent, Screen

YES = "y"
NO = "n"
QUESTION_MARK = "? "


class Confirmation:
    def __init__(self, message: str) -> None:
        self.complete: "queue.Queue[bool]" = queue.Queue()
        self.message = message
        self.screen_x = 0
        self.screen_y = 0
        self.update()

    def draw(self, screen: Screen) -> None:
        draw_text(screen, 0, self.screen_y - 2, self.question_mark_style, QUESTION_MARK)
        draw_text(screen, 2, self.screen_y - 2, self.style, self.message)

    def resize(self, screen_x: int, screen_y: int) -> None:
        self.screen_x = screen_x
        self.screen_y = screen_y

    def update(self) -> None:
        """Pick up the current colour scheme."""
        self.style = default_style()
        self.question_mark_style = default_style().with_bold(True).with_foreground(color("finder.title"))

    def handle_key_event(self, event: KeyEvent) -> None:
        if event.key == Key.ESCAPE:
            self.complete.put(False)
            return
        if event.rune == YES:
            self.complete.put(True)
        elif event.rune == NO:
            self.complete.put(False)


def confirm(app, message: str) -> bool:
    """Show the question and block until the user answers."""
    confirmation = Confirmation(message)
    app.add_drawable(confirmation)
    app.add_system(confirmation)
    return confirmation.complete.get()