"""Fuzzy finder component with a query line and ranked results."""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass, field
from typing import Callable, Optional

from fjira.app import get_app
from fjira.colors import color, default_style
from fjira.draw import draw_text
from fjira.numeric import clamp
from fjira.terminal import Key, KeyEvent, Screen

RESULTS_MARGIN_BOTTOM = 3
WRITE_INDICATOR = "> "
MAX_RESULTS = 4096
DEFAULT_SUPPLIER_DEBOUNCE = 0.05
SEARCH_RESULTS_PIVOT = 6
EMPTY_LINE = ""

_FIRST_CHAR_MATCH_BONUS = 10
_SEPARATOR_MATCH_BONUS = 20
_CAMEL_CASE_MATCH_BONUS = 20
_ADJACENT_MATCH_BONUS = 5
_UNMATCHED_LEADING_CHAR_PENALTY = -5
_MAX_UNMATCHED_LEADING_CHAR_PENALTY = -15
_SEPARATORS = frozenset("/-_ .\\")
_EXTRA_WRITABLE = frozenset("-\"'&;|><=!.")


@dataclass
class Match:
    text: str
    index: int
    matched_indexes: list[int] = field(default_factory=list)
    score: int = 0


@dataclass(frozen=True)
class FuzzyFindResult:
    index: int
    match: str


def _fold_eq(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()


def _match_record(pattern: str, record: str, index: int) -> Optional[Match]:
    matched: list[int] = []
    total = 0
    pattern_index = 0
    best_score = -1
    matched_index = -1
    adjacent_bonus = 0
    last = ""
    last_index = 0
    length = len(record)
    for j, candidate in enumerate(record):
        if pattern_index >= len(pattern):
            break
        if _fold_eq(candidate, pattern[pattern_index]):
            score = 0
            if j == 0:
                score += _FIRST_CHAR_MATCH_BONUS
            if last.islower() and candidate.isupper():
                score += _CAMEL_CASE_MATCH_BONUS
            if j != 0 and last in _SEPARATORS:
                score += _SEPARATOR_MATCH_BONUS
            if matched:
                bonus = adjacent_bonus * 2 + _ADJACENT_MATCH_BONUS if matched[-1] == last_index else 0
                score += bonus
                adjacent_bonus += bonus
            if score > best_score:
                best_score = score
                matched_index = j
        next_p = pattern[pattern_index + 1] if pattern_index < len(pattern) - 1 else ""
        next_c = record[j + 1] if j + 1 < length else ""
        # Apply the best score when the next pattern char comes up or the record ends,
        # so that later, better-scoring occurrences are preferred.
        if not next_c or (next_p and _fold_eq(next_p, next_c)):
            if matched_index > -1:
                if not matched:
                    best_score += max(
                        matched_index * _UNMATCHED_LEADING_CHAR_PENALTY,
                        _MAX_UNMATCHED_LEADING_CHAR_PENALTY,
                    )
                total += best_score
                matched.append(matched_index)
                best_score = -1
                pattern_index += 1
        last_index = j
        last = candidate
    total += len(matched) - length
    if len(matched) != len(pattern):
        return None
    return Match(record, index, matched, total)


def find(pattern: str, records: list[str]) -> list[Match]:
    """Return records matching pattern as a subsequence, best score first."""
    if not pattern:
        return []
    matches = [m for i, r in enumerate(records) if (m := _match_record(pattern, r, i)) is not None]
    return sorted(matches, key=lambda m: -m.score)


class _Debouncer:
    def __init__(self, delay: float) -> None:
        self.delay = delay
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()

    def __call__(self, func: Callable[[], None]) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.delay, func)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None


def _is_writable(rune: str) -> bool:
    if len(rune) != 1:
        return False
    return rune.isalpha() or rune.isspace() or rune.isdecimal() or rune in _EXTRA_WRITABLE


def _find_selected_record(result: str, records: list[str]) -> int:
    for i, record in enumerate(records):
        if record.strip() == result or record == result:
            return i
    return 0


class FuzzyFind:
    """Type-to-filter list; the choice is delivered on ``complete``."""

    def __init__(self, title: str, records: list[str]) -> None:
        self.margin_top = 0
        self.margin_bottom = 1
        self.complete: "queue.Queue[FuzzyFindResult]" = queue.Queue()
        self.records: list[str] = list(records)
        self.title = title
        self.query = EMPTY_LINE
        self.fuzzy_status = "0/0"
        self.matches: list[Match] = []
        self.matches_all: list[Match] = [Match(r, i) for i, r in enumerate(self.records)]
        self.selected = 0
        self.screen_x = 0
        self.screen_y = 0
        self.debounce_disabled = False
        self.disable_fuzzy_match = False
        self._records_provider: Optional[Callable[[str], list[str]]] = None
        self._debouncer = _Debouncer(DEFAULT_SUPPLIER_DEBOUNCE)
        self._buffer = ""
        self._dirty = True

        highlight = (
            default_style()
            .with_foreground(color("finder.highlight.foreground"))
            .with_background(color("finder.highlight.background"))
        )
        self._bold_match_style = (
            default_style().with_foreground(color("finder.match")).with_underline(True).with_bold(True)
        )
        self._cursor_style = default_style().with_foreground(color("finder.cursor")).with_bold(True)
        self._highlight_default = highlight
        self._highlight_bold = highlight.with_foreground(color("finder.highlight.match")).with_bold(True)
        self._bold_style = default_style().with_bold(True)
        self._title_style = default_style().with_italic(True).with_foreground(color("finder.title"))
        self._default_style = default_style()

    def init(self) -> None:
        """Schedule a fresh computation of the results when shown."""
        self._mark_dirty()

    def destroy(self) -> None:
        """Cancel any pending debounced records fetch."""
        self._debouncer.cancel()

    @property
    def selected_item(self) -> str:
        if not self.records:
            return ""
        return self.records[self.selected]

    def draw(self, screen: Screen) -> None:
        if self.screen_x == 0 or self.screen_y == 0:
            self.screen_x, self.screen_y = screen.size()
        self._draw_records(screen)
        status_row = self.screen_y - RESULTS_MARGIN_BOTTOM - self.margin_bottom + 1
        if self.title:
            draw_text(screen, 2, status_row, self._title_style, self.title)
        draw_text(
            screen, self.screen_x - len(self.fuzzy_status) - 2, status_row, self._title_style, self.fuzzy_status
        )
        query_row = self.screen_y - 1 - self.margin_bottom
        draw_text(screen, 0, query_row, self._bold_style, WRITE_INDICATOR)
        draw_text(screen, 2, query_row, self._default_style, self.query)
        screen.show_cursor(2 + len(self.query), query_row)

    def update(self) -> None:
        if not self._dirty:
            return
        buff = self._buffer
        if self._records_provider is not None and self.query != buff:
            self.query = buff
            if self.debounce_disabled:
                self._update_records_from_supplier()
            else:
                self._debouncer(self._update_records_from_supplier)
                self._dirty = False
                return
        self.query = buff
        if not self.query or self.disable_fuzzy_match:
            self.matches = self.matches_all
        else:
            self.matches = find(self.query, self.records)
        self.fuzzy_status = f"{len(self.matches)}/{len(self.records)}"
        self.selected = clamp(self.selected, 0, len(self.matches) - 1)
        self._dirty = False

    def force_update(self) -> None:
        self._mark_dirty()
        self.update()

    def handle_key_event(self, event: KeyEvent) -> None:
        key = event.key
        if key in (Key.CTRL_C, Key.ESCAPE):
            self.complete.put(FuzzyFindResult(-1, ""))
        if key == Key.ENTER:
            self._mark_dirty()
            self.update()
            if self.matches and self.selected >= 0:
                match = self.matches[self.selected].text
                self.complete.put(FuzzyFindResult(_find_selected_record(match, self.records), match))
            else:
                self.complete.put(FuzzyFindResult(-1, ""))
        if key in (Key.BACKSPACE, Key.BACKSPACE2):
            self._buffer = self._buffer[:-1]
            self._mark_dirty()
        last = len(self.matches) - 1
        if key in (Key.UP, Key.TAB):
            self.selected = clamp(self.selected + 1, 0, last)
            return
        if key in (Key.DOWN, Key.BACKTAB):
            self.selected = clamp(self.selected - 1, 0, last)
            return
        if key == Key.PGUP:
            self.selected = clamp(self.selected + 10, 0, last)
            return
        if key == Key.PGDN:
            self.selected = clamp(self.selected - 10, 0, last)
            return
        if _is_writable(event.rune):
            self._buffer += event.rune
            self._mark_dirty()

    def resize(self, screen_x: int, screen_y: int) -> None:
        self.screen_x = screen_x
        self.screen_y = screen_y

    def set_query(self, query: str) -> None:
        self._buffer += query
        self._mark_dirty()

    def always_show_all_results(self) -> None:
        self.disable_fuzzy_match = True

    def set_debounce(self, seconds: float) -> None:
        self._debouncer = _Debouncer(seconds)

    def _draw_records(self, screen: Screen) -> None:
        count = len(self.matches)
        if count == 0:
            return
        row = self.screen_y - RESULTS_MARGIN_BOTTOM - self.margin_bottom
        start = clamp(self.selected - row + SEARCH_RESULTS_PIVOT, 0, count - 1)
        for index in range(start, count):
            if row <= self.margin_top:
                break
            match = self.matches[index]
            plain, bold = self._default_style, self._bold_match_style
            if index == self.selected:
                draw_text(screen, 0, row, self._cursor_style, WRITE_INDICATOR)
                plain, bold = self._highlight_default, self._highlight_bold
            highlighted = set(match.matched_indexes)
            for offset, ch in enumerate(match.text):
                draw_text(screen, offset + 2, row, bold if offset in highlighted else plain, ch)
            row -= 1

    def _update_records_from_supplier(self) -> None:
        assert self._records_provider is not None
        self.records = list(self._records_provider(self.query))
        self.matches_all = [Match(r, i) for i, r in enumerate(self.records)]
        self._mark_dirty()

    def _mark_dirty(self) -> None:
        self._dirty = True
        app = get_app()
        if app is not None:
            app.run_on_app_routine(app.set_dirty)


def new_fuzzy_find_with_provider(title: str, records_provider: Callable[[str], list[str]]) -> FuzzyFind:
    """A finder whose records are fetched for each query, debounced."""
    finder = FuzzyFind(title, [])
    finder.query = "init"
    finder._records_provider = records_provider
    return finder