"""Short-lived success and error messages."""

from __future__ import annotations

import logging

from fjira.app import get_app
from fjira.colors import color, default_style
from fjira.text_box import TextBox

ERROR_SECONDS = 5.0
SUCCESS_SECONDS = 3.0

_log = logging.getLogger(__name__)


def _show(text: str, prefix: str, duration: float) -> None:
    app = get_app()
    if app is None:
        _log.warning("%s", text)
        return
    style = (
        default_style()
        .with_foreground(color(f"alerts.{prefix}.foreground"))
        .with_background(color(f"alerts.{prefix}.background"))
    )
    box = TextBox(app.screen_x // 2 - len(text) // 2, app.screen_y - 1, style, style, text)
    app.add_flash(box, duration)


def error(message: str) -> None:
    _show(f"Error! -{message}", "error", ERROR_SECONDS)


def success(message: str) -> None:
    _show(f"Success! {message}", "success", SUCCESS_SECONDS)