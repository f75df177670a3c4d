"""Detail view of a single session, with sub-tabs."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime, timedelta
from typing import Protocol

from simpsons.keys import KeyMsg, KeyType
from simpsons.styles import Style
from simpsons.views.formatting import format_duration, format_tokens_short
from simpsons.views.toolitems import scroll_window
from simpsons.views.wraptext import wrap_text

TAB_NAMES = ("Chat", "Overview", "Timeline", "Files", "Agents", "Tools")

_ACTIVE_STYLE = Style(foreground="#FF8C00", bold=True, underline=True)
_INACTIVE_STYLE = Style(foreground="#6B7280")


class _SessionMeta(Protocol):
    uuid: str
    slug: str
    duration: timedelta
    tokens_in: int
    tokens_out: int
    message_count: int
    subagent_count: int
    tool_usage: Mapping[str, int]
    models: Mapping[str, int]
    git_branches: Sequence[str]
    initial_prompt: str
    entrypoint: str
    linked_pr_count: int
    turn_count: int
    total_turn_ms: int


class _TimelineEvent(Protocol):
    timestamp: datetime | None
    type: str
    tool_name: str
    content: str


class _FileOp(Protocol):
    path: str
    operation: str
    tool_name: str


class _Subagent(Protocol):
    agent_id: str
    type: str
    tool_usage: Mapping[str, int]


class _ChatMessage(Protocol):
    role: str
    content: str


class _SessionDetail(Protocol):
    chat_messages: Sequence[_ChatMessage]
    timeline: Sequence[_TimelineEvent]
    file_activity: Sequence[_FileOp]
    subagents: Sequence[_Subagent]


class SessionDetailView:
    """Chat, overview, timeline, files, agents and tools of one session."""

    def __init__(
        self,
        store: object | None,
        session: _SessionMeta | None,
        detail: _SessionDetail | None,
    ) -> None:
        self.store = store
        self.session = session
        self.detail = detail
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
            (_ACTIVE_STYLE if index == self.active_tab else _INACTIVE_STYLE).render(name)
            for index, name in enumerate(TAB_NAMES)
        )
        header = f"\n  {tabs}\n  " + "─" * (width - 4) + "\n"

        renderers = (
            self._render_chat,
            self._render_overview,
            self._render_timeline,
            self._render_files,
            self._render_agents,
            self._render_tools,
        )
        content = renderers[self.active_tab](width)
        visible, self.scroll_y = scroll_window(
            content.split("\n"), self.scroll_y, height - 6
        )
        return header + "\n".join(visible)

    def _render_overview(self, width: int) -> str:
        m = self.session
        if m is None:
            return "  No session selected."

        lines = [f"  Session: {m.slug or m.uuid}", ""]
        stats = [
            ("Duration:", format_duration(m.duration)),
            ("Tokens In:", format_tokens_short(m.tokens_in)),
            ("Tokens Out:", format_tokens_short(m.tokens_out)),
            ("Messages:", str(m.message_count)),
            ("Tools:", str(sum(m.tool_usage.values()))),
            ("Subagents:", str(m.subagent_count)),
        ]
        if m.entrypoint:
            stats.append(("Source:", m.entrypoint))
        if m.linked_pr_count > 0:
            stats.append(("PRs Linked:", str(m.linked_pr_count)))
        if m.turn_count > 0:
            average_ms = m.total_turn_ms / m.turn_count
            stats.append(("Avg Turn:", f"{average_ms / 1000.0:.1f}s"))
        lines.extend(f"  {label:<15} {value}" for label, value in stats)
        lines.append("")

        if m.initial_prompt:
            prompt = m.initial_prompt
            if len(prompt) > width - 6:
                prompt = prompt[: max(width - 9, 0)] + "..."
            lines.extend(["  Initial Prompt:", "  " + prompt, ""])

        if m.models:
            lines.append("  Models:")
            lines.extend(f"    {name:<40} {count} messages" for name, count in m.models.items())
            lines.append("")

        if m.git_branches:
            lines.append("  Git Branches: " + ", ".join(m.git_branches))

        return "\n".join(lines) + "\n"

    def _render_timeline(self, width: int) -> str:
        if self.detail is None or not self.detail.timeline:
            return "  No timeline events."
        max_content = max(width - 42, 10)
        lines = [
            f"  {'Time':<8} {'Type':<12} {'Tool':<15} Content",
            "  " + "─" * (width - 4),
        ]
        for event in self.detail.timeline:
            time_str = event.timestamp.strftime("%H:%M:%S") if event.timestamp is not None else ""
            content = event.content
            if len(content) > max_content:
                content = content[: max_content - 3] + "..."
            lines.append(f"  {time_str:<8} {event.type:<12} {event.tool_name:<15} {content}")
        return "\n".join(lines) + "\n"

    def _render_files(self, width: int) -> str:
        if self.detail is None or not self.detail.file_activity:
            return "  No file activity."
        lines = [f"  {'Path':<50} {'Operation':<10} Tool", "  " + "─" * (width - 4)]
        for op in self.detail.file_activity:
            path = op.path if len(op.path) <= 50 else "..." + op.path[-47:]
            lines.append(f"  {path:<50} {op.operation:<10} {op.tool_name}")
        return "\n".join(lines) + "\n"

    def _render_agents(self, width: int) -> str:
        if self.detail is None or not self.detail.subagents:
            return "  No subagents in this session."
        lines = [f"  {'Agent ID':<20} {'Type':<15} Tools", "  " + "─" * (width - 4)]
        for agent in self.detail.subagents:
            agent_id = agent.agent_id
            if len(agent_id) > 20:
                agent_id = agent_id[:17] + "..."
            lines.append(f"  {agent_id:<20} {agent.type:<15} {sum(agent.tool_usage.values())}")
        return "\n".join(lines) + "\n"

    def _render_tools(self, width: int) -> str:
        if self.session is None or not self.session.tool_usage:
            return "  No tool usage in this session."
        ranked = sorted(self.session.tool_usage.items(), key=lambda item: (-item[1], item[0]))
        lines = [f"  {'Tool':<30} {'Count':>10}", "  " + "─" * 42]
        lines.extend(f"  {name:<30} {count:>10d}" for name, count in ranked)
        return "\n".join(lines) + "\n"

    def _render_chat(self, width: int) -> str:
        if self.detail is None or not self.detail.chat_messages:
            return "  No chat messages."
        content_width = max(width - 6, 20)
        parts: list[str] = []
        for message in self.detail.chat_messages:
            if message.role in ("user", "assistant"):
                title = "▶ You:" if message.role == "user" else "◀ Assistant:"
                parts.append(f"\n  {title}\n")
                parts.extend(
                    f"    {line}\n" for line in wrap_text(message.content, content_width)
                )
            elif message.role == "tool":
                parts.append(f"    ⚙ {message.content}\n")
        return "".join(parts)