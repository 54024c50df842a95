# fjira

Building blocks for a fuzzy-finding Jira client in the terminal: a small
terminal toolkit and the widgets built on it.

- `fjira.terminal`: `Key`, `KeyEvent`, `ResizeEvent`, the immutable `Style`
  (`with_foreground`, `with_bold`, ...), `parse_color`, a curses-backed
  `CursesScreen` and an in-memory `SimulationScreen` for tests and headless
  use, plus the `Drawable`, `Resizable`, `System`, `KeyListener` and `View`
  protocols.
- `fjira.draw`: `draw_text`, `draw_text_limited` (wraps at a column and
  returns the last row reached; the screen may be `None` to only measure) and
  `draw_box`.
- `fjira.text.Text`, `fjira.text_box.TextBox`, `fjira.spinner.Spinner`:
  simple drawables.
- `fjira.action_bar`: `ActionBar` and `ActionBarItem`, bars of labelled
  actions aligned to the top or bottom and left or right. A matching key or
  rune puts the item's id on the bar's `actions` queue.
- `fjira.fuzzy_find`: the `find` matching function and the `FuzzyFind`
  widget; `new_fuzzy_find_with_provider` builds a finder whose records are
  fetched for each query, debounced.
- `fjira.confirmation`: `Confirmation` and the blocking `confirm(app, message)`.
- `fjira.flash`: `success` and `error` messages shown on the running app for
  3 and 5 seconds.
- `fjira.app`: `App`, the render loop that draws drawables and flashes,
  updates systems and passes key events to key listeners;
  `create_new_app` (curses screen), `create_new_app_with_screen`,
  `init_test_app` (simulation screen) and `get_app`.
- `fjira.goto`: named screens with `register_goto`, `go_to`, `go_back`,
  `current_screen_name` and `previous_screen_name`.
- `fjira.colors`: the colour scheme: `color`, `default_style`,
  `load_color_scheme`, `set_home_dir`, `get_home_dir`.
- `fjira.formatters`: `format_boards` and `format_filters`, which return the
  `name` of each object given.
- `fjira.numeric.clamp`.

## Drawing on a screen

```python
from fjira.colors import default_style
from fjira.draw import draw_text
from fjira.terminal import SimulationScreen

screen = SimulationScreen(80, 24)
screen.init()
draw_text(screen, 0, 0, default_style(), "hello")
print(screen.text())
```

Key presses can be fed to a `SimulationScreen` with `inject_key(Key.ENTER)`
or `inject_key(Key.RUNE, "a")`; `poll_event` returns them in order.

## Fuzzy matching

```python
from fjira.fuzzy_find import find

for match in find("gen", ["GEN-1 Login page", "OPS-2 Deploy", "GEN-3 Logout"]):
    print(match.text, match.index, match.matched_indexes, match.score)
```

Matching is case-insensitive and treats the pattern as a subsequence; results
come best score first, and an empty pattern matches nothing.

`FuzzyFind(title, records)` wraps the same matching in a widget: type to
narrow the list, move with the arrow keys, Tab/Shift-Tab or Page Up/Down,
confirm with Enter and cancel with Escape or Ctrl-C. The choice is put on the
finder's `complete` queue as a `FuzzyFindResult` holding its `index` and
`match` (index `-1` when nothing was chosen).

## Screens and navigation

```python
from fjira.goto import register_goto, go_to, go_back, current_screen_name

register_goto("projects", lambda *args: print("projects", args))
register_goto("issues", lambda *args: print("issues", args))

go_to("projects")
go_to("issues", "GEN")
go_back()
print(current_screen_name())  # projects
```

Unknown names are ignored. Only one step of history is kept.

## Colours

Colours are looked up by dotted name, for example
`color("navigation.top.background")`; an unknown name raises `KeyError`.
When there is no `colors.yml` in `get_home_dir()` (the `.fjira` directory of
the home directory) the built-in scheme is loaded. When the file exists its
entries are loaded instead and merged into the colour table already held, so
names it leaves out stay known only if they were loaded before:

```yaml
navigation:
  top:
    background: "#0000FF"
```

Call `set_home_dir` to point the package at a different home directory, then
`load_color_scheme` to reload.

## What this package does not do

It has no Jira API client, no workspace or credential settings, no project,
issue or board screens and no command-line program. It supplies the terminal
widgets, the application loop and the navigation registry on which such
screens are built.