"""Tool usage list, split into built-in tools and MCP tools by server."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol

from simpsons.keys import KeyMsg, KeyType

_MCP_PREFIX = "mcp__"
_BUILTIN = "builtin"


class _ToolSession(Protocol):
    uuid: str
    tool_usage: Mapping[str, int]


class _SessionStore(Protocol):
    def all_sessions(self) -> Sequence[_ToolSession]: ...


def parse_mcp_tool(name: str) -> tuple[str, str]:
    """Split ``mcp__server__tool`` into ``(server, tool)``.

    A name without a tool part yields the remainder for both.
    """
    rest = name.removeprefix(_MCP_PREFIX)
    server, sep, tool = rest.partition("__")
    if sep:
        return server, tool
    return rest, rest


@dataclass(frozen=True)
class ToolRow:
    """Display data for one tool."""

    name: str
    server: str
    calls: int
    session_count: int


class ToolsView:
    """Lists every tool with its call count and the sessions that used it."""

    def __init__(self, store: _SessionStore) -> None:
        self.store = store
        self.selected = 0

    def update(self, key: KeyMsg) -> None:
        """Move the selection for arrow keys and ``j``/``k``."""
        if key.type is KeyType.UP or (key.type is KeyType.RUNES and key.runes == "k"):
            if self.selected > 0:
                self.selected -= 1
        elif key.type is KeyType.DOWN or (key.type is KeyType.RUNES and key.runes == "j"):
            self.selected += 1

    def build_tool_rows(self) -> list[ToolRow]:
        """Aggregate tool usage over all sessions, most called first."""
        calls: dict[str, int] = {}
        users: dict[str, set[str]] = {}
        for session in self.store.all_sessions():
            for tool, count in session.tool_usage.items():
                calls[tool] = calls.get(tool, 0) + count
                users.setdefault(tool, set()).add(session.uuid)

        rows = []
        for name, total in calls.items():
            server, display = _BUILTIN, name
            if name.startswith(_MCP_PREFIX):
                server, display = parse_mcp_tool(name)
            rows.append(ToolRow(display, server, total, len(users[name])))
        rows.sort(key=lambda row: row.calls, reverse=True)
        return rows

    def view(self, width: int, height: int) -> str:
        """Render the tool tables."""
        if not self.store.all_sessions():
            return "\n  No session data available. Waiting for scan to complete..."

        rows = self.build_tool_rows()
        if not rows:
            return "\n  No tool usage data found."

        if self.selected >= len(rows):
            self.selected = len(rows) - 1

        builtins = [row for row in rows if row.server == _BUILTIN]
        by_server: dict[str, list[ToolRow]] = {}
        for row in rows:
            if row.server != _BUILTIN:
                by_server.setdefault(row.server, []).append(row)

        table_header = (
            f"  {'Tool':<20} {'Calls':>10} {'Sessions':>10}\n" + "  " + "─" * 42 + "\n"
        )
        parts = ["\n"]
        line_index = 0

        def table(table_rows: list[ToolRow]) -> None:
            nonlocal line_index
            parts.append(table_header)
            for row in table_rows:
                prefix = "> " if line_index == self.selected else "  "
                parts.append(
                    f"{prefix}{row.name:<20} {row.calls:>10d} {row.session_count:>10d}\n"
                )
                line_index += 1
            parts.append("\n")

        if builtins:
            parts.append("  Built-in Tools\n")
            table(builtins)

        if by_server:
            parts.append("  MCP Tools\n")
            for server in sorted(by_server):
                parts.append(f"  [{server}]\n")
                table(by_server[server])

        return "".join(parts)