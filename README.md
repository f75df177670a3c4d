# simpsons

Text-mode widgets and screens for a terminal dashboard of coding-assistant
session history: bar charts, day-by-hour heatmaps, sparklines, vertical bar
graphs, a filter box, a text input, a project picker, and screens that
summarise tools, subagents, a single project and a single session.

Everything renders to plain strings with ANSI colour codes, so the output can
be printed directly or embedded in any terminal application. The package has
no runtime dependencies.

## Charts

```python
from simpsons.components.barchart import BarItem, bar_chart
from simpsons.components.heatmap import heatmap
from simpsons.components.sparkline import sparkline, bar_graph, bar_graph_colored

print(bar_chart([BarItem("Read", 100), BarItem("Edit", 50), BarItem("Bash", 25)], 40))

grid = [[0] * 24 for _ in range(7)]   # rows Mon..Sun, columns hours 0..23
grid[0][9] = 5
grid[3][14] = 10
print(heatmap(grid))                  # ValueError unless the grid is 7 x 24

print(sparkline([1, 3, 5, 2, 7, 4, 6], 20))
print(bar_graph([1, 3, 0, 5, 2, 7, 4], 30, 6))
print(bar_graph_colored([1, 3, 0, 5, 2, 7, 4], 30, 6, "#10B981"))
```

`sparkline` and the bar graphs sample the data down evenly when it has more
points than the given width. The bar graphs draw day markers and `7d`, `14d`…
labels counting back from the right-hand edge.

## Inputs

Interactive components take key events from `simpsons.keys`: a `KeyMsg` with a
`KeyType` (`RUNES`, `ESC`, `ENTER`, `BACKSPACE`, `TAB`, `UP`, `DOWN`, `LEFT`,
`RIGHT`). `KeyMsg.runes_key(text)` builds a typed-text event. Each component's
`update(key)` returns whether the key was consumed.

```python
from simpsons.keys import KeyMsg
from simpsons.components.filter import Filter

f = Filter()
f.update(KeyMsg.runes_key("/"))     # activates the filter
for ch in "hello":
    f.update(KeyMsg.runes_key(ch))
print(f.view())                     # "/ hello▎"
print(f.matches("Hello World"))     # True, case-insensitive
```

- `Filter`: opened with `/`; Esc closes and clears, Enter closes and keeps the
  query.
- `TextInput(prompt)`: only consumes keys while `active`; Esc clears, Enter
  keeps `value`.
- `ProjectPicker(projects, original_path)`: up/down or `j`/`k` move through the
  projects and a final custom entry, Tab toggles typing a custom path,
  `selected_project()` returns the choice, and `view(width)` marks the
  original path with `(original)`.

## Formatting and data helpers

```python
from datetime import timedelta
from simpsons.views.formatting import decode_path, format_duration, format_tokens_short

decode_path("-Users-foo-my--project")          # "/Users/foo/my-project"
format_duration(timedelta(hours=1, minutes=5))  # "1h05m"
format_tokens_short(1500)                       # "1.5K"
```

- `simpsons.views.activity`: `build_spark_data` and `build_cost_spark_data`
  (per-day series for the last *n* days, keyed by `YYYY-MM-DD`), `week_costs`
  (this week's and last week's totals) and `build_heatmap_from_sessions`
  (7x24 counts of session start times, Monday first).
- `simpsons.views.toolitems`: `top_n_tool_items` ranks tool counts as
  `BarItem`s; `scroll_window` clips lines to a scroll offset and height.
- `simpsons.views.wraptext.wrap_text` word-wraps text, keeping paragraph
  breaks.

## Theme

`simpsons.styles.default_theme()` returns the colour palette as a `Theme`, and
`Styles.from_theme(theme)` builds the matching set of `Style` objects whose
`render(text)` method applies colours, bold, faint, underline and padding.

## Screens

Each screen has a `view(width, height)` method returning the rendered text.

- `AgentsView(store)` in `simpsons.views.agents`: subagent totals and adoption
  rate.
- `ToolsView(store)` in `simpsons.views.tools`: call and session counts per
  tool, built-in tools first, then MCP tools grouped by server
  (`parse_mcp_tool` splits `mcp__server__tool` names). `update(key)` moves the
  selection with arrows or `j`/`k`.
- `ProjectDetailView(project, sessions)` in `simpsons.views.project_detail`:
  Overview, Sessions, Tools, Activity and Skills sub-tabs.
- `SessionDetailView(store, session, detail)` in
  `simpsons.views.session_detail`: Chat, Overview, Timeline, Files, Agents and
  Tools sub-tabs.

In both detail screens `update(key)` switches sub-tabs with left/right or
`h`/`l` and scrolls with up/down or `k`/`j`.

The screens are duck-typed: a store is any object with an `all_sessions()`
method, and sessions, details, timeline events, file operations, subagents and
chat messages are any objects carrying the attributes the screen reads (for
example `uuid`, `slug`, `start_time`, `duration`, `tool_usage`,
`subagent_count`).

## What this package does not do

It has no command to start, no full-screen event loop, and no code that finds,
reads or stores session files: the caller supplies the store and session
objects. There are no sessions-list, projects-list or overall analysis
screens.

## Running the tests

Install the `test` extra and run `pytest` from the project root.