"""Summary of subagent usage across all sessions."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol


class _AgentSession(Protocol):
    subagent_count: int
    tool_usage: Mapping[str, int]


class _SessionStore(Protocol):
    def all_sessions(self) -> Sequence[_AgentSession]: ...


_EMPTY = "\n  No session data available. Waiting for scan to complete..."


class AgentsView:
    """Shows aggregate subagent statistics for the sessions in a store."""

    def __init__(self, store: _SessionStore) -> None:
        self.store = store

    def view(self, width: int, height: int) -> str:
        """Render the subagent usage summary."""
        sessions = list(self.store.all_sessions())
        if not sessions:
            return _EMPTY

        total_subagents = sum(s.subagent_count for s in sessions)
        with_subagents = sum(1 for s in sessions if s.subagent_count > 0)
        agent_calls = sum(s.tool_usage.get("Agent", 0) for s in sessions)
        average = total_subagents / with_subagents if with_subagents else 0.0

        stats = [
            ("Total subagent invocations", total_subagents),
            ("Agent tool calls", agent_calls),
            ("Sessions using subagents", with_subagents),
            ("Total sessions", len(sessions)),
        ]
        parts = ["\n", "  Subagent Usage Summary\n", "  " + "─" * 50 + "\n\n"]
        parts.extend(f"  {label:<35} {value:>10d}\n" for label, value in stats)
        parts.append(f"  {'Avg subagents per session (when used)':<35} {average:>10.1f}\n")
        parts.append("\n")
        adoption = with_subagents * 100 // len(sessions)
        parts.append(f"  Subagent adoption: {adoption}% of sessions\n")
        return "".join(parts)