"""Text and box drawing helpers."""

from __future__ import annotations

from typing import Optional

from fjira.terminal import Screen, Style

H_LINE = "─"
V_LINE = "│"
UL_CORNER = "┌"
UR_CORNER = "┐"
LL_CORNER = "└"
LR_CORNER = "┘"


def draw_text(screen: Screen, x: int, y: int, style: Style, text: str) -> None:
    row, col = y, x
    for ch in text:
        if ch == "\n":
            row += 1
            col = x
            continue
        screen.set_content(col, row, ch, style)
        col += 1


def draw_text_limited(
    screen: Optional[Screen], x1: int, y1: int, x2: int, y2: int, style: Style, text: str
) -> int:
    """Draw text wrapped at x2 and stopped past y2; return the last row reached."""
    row, col = y1, x1
    for ch in text:
        if ch == "\n":
            row += 1
            col = x1
            continue
        if screen is not None:
            screen.set_content(col, row, ch, style)
        col += 1
        if col >= x2:
            row += 1
            col = x1
        if row > y2:
            break
    return row


def draw_box(screen: Screen, x1: int, y1: int, x2: int, y2: int, style: Style) -> None:
    if y2 < y1:
        y1, y2 = y2, y1
    if x2 < x1:
        x1, x2 = x2, x1
    for col in range(x1, x2 + 1):
        screen.set_content(col, y1, H_LINE, style)
        screen.set_content(col, y2, H_LINE, style)
    for row in range(y1 + 1, y2):
        screen.set_content(x1, row, V_LINE, style)
        screen.set_content(x2, row, V_LINE, style)
    if y1 != y2 and x1 != x2:
        screen.set_content(x1, y1, UL_CORNER, style)
        screen.set_content(x2, y1, UR_CORNER, style)
        screen.set_content(x1, y2, LL_CORNER, style)
        screen.set_content(x2, y2, LR_CORNER, style)