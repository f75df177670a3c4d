"""Detail view of a single project, with sub-tabs."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime, timedelta
from typing import Protocol

from simpsons.components.barchart import bar_chart
from simpsons.components.heatmap import heatmap as render_heatmap
from simpsons.components.sparkline import bar_graph
from simpsons.keys import KeyMsg, KeyType
from simpsons.views.activity import build_heatmap_from_sessions, build_spark_data
from simpsons.views.formatting import format_duration, format_tokens_short
from simpsons.views.toolitems import scroll_window, top_n_tool_items

TAB_NAMES = ("Overview", "Sessions", "Tools", "Activity", "Skills")

_EXPLORE_TOOLS = frozenset(
    {"Read", "Grep", "Glob", "WebFetch", "WebSearch", "LS", "SemanticSearch"}
)
_BUILD_TOOLS = frozenset({"Write", "Edit", "StrReplace"})
_TEST_TOOLS = frozenset({"Bash", "Agent", "TaskCreate", "TaskUpdate"})


class _ProjectSession(Protocol):
    uuid: str
    slug: str
    start_time: datetime | None
    end_time: datetime | None
    duration: timedelta
    tokens_in: int
    tokens_out: int
    message_count: int
    subagent_count: int
    tool_usage: Mapping[str, int]
    models: Mapping[str, int]
    skills_used: Mapping[str, int]
    git_branches: Sequence[str]


def _start_key(session: _ProjectSession) -> tuple[bool, datetime]:
    start = session.start_time
    return (start is not None, start if start is not None else datetime.min)


def _indent(block: str) -> list[str]:
    return ["  " + line for line in block.split("\n")]


class ProjectDetailView:
    """Overview, sessions, tools, activity and skills of one project."""

    def __init__(self, project: str, sessions: Iterable[_ProjectSession] | None) -> None:
        self.project = project
        self.sessions = sorted(sessions or [], key=_start_key, reverse=True)
        self.active_tab = 0
        self.scroll_y = 0

    def _switch_tab(self, step: int) -> None:
        self.active_tab = (self.active_tab + step) % len(TAB_NAMES)
        self.scroll_y = 0

    def update(self, key: KeyMsg) -> None:
        """Switch sub-tabs with left/right or ``h``/``l``; scroll with up/down or ``k``/``j``."""
        rune = key.runes if key.type is KeyType.RUNES else ""
        if key.type is KeyType.LEFT or rune == "h":
            self._switch_tab(-1)
        elif key.type is KeyType.RIGHT or rune == "l":
            self._switch_tab(1)
        elif key.type is KeyType.UP or rune == "k":
            if self.scroll_y > 0:
                self.scroll_y -= 1
        elif key.type is KeyType.DOWN or rune == "j":
            self.scroll_y += 1

    def view(self, width: int, height: int) -> str:
        """Render the sub-tab bar and the visible part of the active tab."""
        tabs = "  ".join(
            f"[{name}]" if index == self.active_tab else f" {name} "
            for index, name in enumerate(TAB_NAMES)
        )
        header = f"\n  {tabs}\n  " + "─" * (width - 4) + "\n"

        renderers = (
            self._render_overview,
            self._render_sessions,
            self._render_tools,
            self._render_activity,
            self._render_skills,
        )
        content = renderers[self.active_tab](width)
        visible, self.scroll_y = scroll_window(
            content.split("\n"), self.scroll_y, height - 6
        )
        return header + "\n".join(visible)

    def _decoded_name(self) -> str:
        return "/" + self.project.removeprefix("-").replace("-", "/")

    def _render_overview(self, width: int) -> str:
        lines = [f"  Project: {self._decoded_name()}", ""]

        total_duration = timedelta(0)
        models: Counter[str] = Counter()
        branches: set[str] = set()
        earliest: datetime | None = None
        latest: datetime | None = None
        for s in self.sessions:
            total_duration += s.duration
            models.update(s.models)
            branches.update(s.git_branches)
            if s.start_time is not None and (earliest is None or s.start_time < earliest):
                earliest = s.start_time
            if s.end_time is not None and (latest is None or s.end_time > latest):
                latest = s.end_time

        stats = [
            ("Sessions:", str(len(self.sessions))),
            ("Total Time:", format_duration(total_duration)),
            ("Tokens In:", format_tokens_short(sum(s.tokens_in for s in self.sessions))),
            ("Tokens Out:", format_tokens_short(sum(s.tokens_out for s in self.sessions))),
            ("Messages:", str(sum(s.message_count for s in self.sessions))),
            ("Tool Calls:", str(sum(sum(s.tool_usage.values()) for s in self.sessions))),
            ("Subagents:", str(sum(s.subagent_count for s in self.sessions))),
        ]
        lines.extend(f"  {label:<15} {value}" for label, value in stats)
        lines.append("")

        if earliest is not None:
            last = latest.strftime("%Y-%m-%d") if latest is not None else "0001-01-01"
            lines.append(f"  {'Active:':<15} {earliest.strftime('%Y-%m-%d')} → {last}")
            lines.append("")

        if models:
            lines.append("  Models:")
            lines.extend(f"    {name:<40} {count} messages" for name, count in models.items())
            lines.append("")

        explore = build = test = 0
        for s in self.sessions:
            for tool, count in s.tool_usage.items():
                if tool in _EXPLORE_TOOLS:
                    explore += count
                elif tool in _BUILD_TOOLS:
                    build += count
                elif tool in _TEST_TOOLS:
                    test += count
        total_work = explore + build + test
        if total_work > 0:
            lines.append("  Work Mode:")
            lines.append(
                f"    Exploration {explore * 100 // total_work}%"
                f"    Building {build * 100 // total_work}%"
                f"    Testing {test * 100 // total_work}%"
            )
            lines.append("")

        if branches:
            lines.append("  Git Branches: " + ", ".join(sorted(branches)))

        return "\n".join(lines) + "\n"

    def _render_sessions(self, width: int) -> str:
        if not self.sessions:
            return "  No sessions in this project."
        lines = [
            f"  {'Session':<30} {'Date':<20} {'Duration':<12} {'Tokens':>10}",
            "  " + "─" * (width - 4),
        ]
        for s in self.sessions:
            slug = s.slug or s.uuid[:8]
            if len(slug) > 30:
                slug = slug[:27] + "..."
            date = s.start_time.strftime("%Y-%m-%d %H:%M") if s.start_time is not None else ""
            tokens = format_tokens_short(s.tokens_in + s.tokens_out)
            lines.append(
                f"  {slug:<30} {date:<20} {format_duration(s.duration):<12} {tokens:>10}"
            )
        return "\n".join(lines) + "\n"

    def _render_tools(self, width: int) -> str:
        tools: Counter[str] = Counter()
        for s in self.sessions:
            tools.update(s.tool_usage)
        if not tools:
            return "  No tool usage in this project."
        chart = bar_chart(top_n_tool_items(tools, 10), width - 4)
        return "  Top Tools\n" + "  " + chart.replace("\n", "\n  ") + "\n"

    def _render_activity(self, width: int) -> str:
        lines: list[str] = []
        by_date = Counter(
            s.start_time.strftime("%Y-%m-%d")
            for s in self.sessions
            if s.start_time is not None
        )
        if by_date:
            lines.append("  Sessions (last 30 days)")
            graph = bar_graph(build_spark_data(by_date, 30), max(width - 6, 30), 8)
            lines.extend(_indent(graph))
            lines.append("")

        lines.append("  Activity Heatmap (day × hour)")
        lines.extend(_indent(render_heatmap(build_heatmap_from_sessions(self.sessions))))
        return "\n".join(lines) + "\n"

    def _render_skills(self, width: int) -> str:
        skills: Counter[str] = Counter()
        for s in self.sessions:
            skills.update(s.skills_used)
        if not skills:
            return "  No skills used in this project."
        ranked = sorted(skills.items(), key=lambda item: (-item[1], item[0]))
        lines = [f"  {'Skill':<40} {'Uses':>10}", "  " + "─" * 52]
        lines.extend(f"  {name:<40} {count:>10d}" for name, count in ranked)
        return "\n".join(lines) + "\n"