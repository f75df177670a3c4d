from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta

import pytest

from simpsons.keys import KeyMsg, KeyType
from simpsons.views.session_detail import SessionDetailView


@dataclass
class FakeMeta:
    uuid: str
    slug: str = ""
    project_path: str = ""
    duration: timedelta = timedelta(0)
    initial_prompt: str = ""
    tokens_in: int = 0
    tokens_out: int = 0
    message_count: int = 0
    subagent_count: int = 0
    tool_usage: dict = field(default_factory=dict)
    models: dict = field(default_factory=dict)
    git_branches: list = field(default_factory=list)
    entrypoint: str = ""
    linked_pr_count: int = 0
    turn_count: int = 0
    total_turn_ms: int = 0


@dataclass
class FakeChat:
    role: str
    content: str
    tool_name: str = ""


@dataclass
class FakeEvent:
    timestamp: datetime | None
    type: str
    content: str
    tool_name: str = ""


@dataclass
class FakeFileOp:
    path: str
    operation: str
    tool_name: str


@dataclass
class FakeAgent:
    agent_id: str
    type: str
    tool_usage: dict = field(default_factory=dict)


@dataclass
class FakeDetail:
    chat_messages: list = field(default_factory=list)
    timeline: list = field(default_factory=list)
    file_activity: list = field(default_factory=list)
    subagents: list = field(default_factory=list)


def make_detail():
    now = datetime(2026, 3, 2, 14, 30, 0)
    meta = FakeMeta(
        uuid="test-uuid", slug="happy-cat",
        project_path="-Users-r-work-myproject",
        duration=timedelta(hours=1),
        initial_prompt="Fix the login bug please",
        tokens_in=10000, tokens_out=5000,
        models={"claude-opus-4-6": 5, "claude-sonnet-4-6": 2},
        tool_usage={"Read": 10, "Edit": 5, "Bash": 3},
        message_count=20,
        git_branches=["main", "feature"],
    )
    detail = FakeDetail(
        chat_messages=[
            FakeChat("user", "Fix the login bug please"),
            FakeChat("assistant", "I'll look at the login code and fix it."),
            FakeChat("tool", "Read → /work/login.go", "Read"),
            FakeChat("tool", "Edit → /work/login.go", "Edit"),
            FakeChat("assistant", "I've fixed the login bug."),
            FakeChat("user", "Run the tests"),
            FakeChat("tool", "Bash", "Bash"),
        ],
        timeline=[
            FakeEvent(now - timedelta(hours=1), "user", "Fix the login bug please"),
            FakeEvent(now - timedelta(minutes=55), "tool_use", "/work/login.go", "Read"),
            FakeEvent(now - timedelta(minutes=50), "tool_use", "/work/login.go", "Edit"),
            FakeEvent(now - timedelta(minutes=45), "user", "Run the tests"),
            FakeEvent(now - timedelta(minutes=40), "tool_use", "make test", "Bash"),
        ],
        file_activity=[
            FakeFileOp("/work/login.go", "read", "Read"),
            FakeFileOp("/work/login.go", "edit", "Edit"),
        ],
        subagents=[FakeAgent("agent1", "Explore", {"Read": 3})],
    )
    return meta, detail


@pytest.fixture
def view():
    meta, detail = make_detail()
    return SessionDetailView(None, meta, detail)


def right():
    return KeyMsg(KeyType.RIGHT)


def empty_view():
    meta = FakeMeta(uuid="empty", slug="empty-session")
    return SessionDetailView(None, meta, FakeDetail())


def test_new_view_starts_on_chat(view):
    assert view.active_tab == 0
    assert view.scroll_y == 0


def test_overview_tab(view):
    view.update(right())
    content = view.view(100, 30)
    assert "happy-cat" in content
    assert "Duration" in content
    assert "Fix the login bug" in content
    assert "Overview" in content
    assert "Duration:" + " " * 7 + "1h00m" in content
    assert "Tools:" + " " * 10 + "18" in content
    assert "Git Branches: main, feature" in content


def test_overview_optional_fields():
    meta = FakeMeta(
        uuid="full-uuid", entrypoint="cli", linked_pr_count=2,
        turn_count=2, total_turn_ms=3000,
    )
    view = SessionDetailView(None, meta, FakeDetail())
    view.active_tab = 1
    content = view.view(100, 30)
    assert "Session: full-uuid" in content
    assert "Source:" + " " * 9 + "cli" in content
    assert "PRs Linked:" + " " * 5 + "2" in content
    assert "Avg Turn:" + " " * 7 + "1.5s" in content


def test_overview_truncates_long_prompt():
    meta = FakeMeta(uuid="u", slug="s", initial_prompt="x" * 200)
    view = SessionDetailView(None, meta, FakeDetail())
    view.active_tab = 1
    content = view.view(40, 30)
    assert "  " + "x" * 31 + "..." in content
    assert "x" * 32 not in content


def test_timeline_tab(view):
    view.update(right())
    view.update(right())
    content = view.view(100, 30)
    assert "Timeline" in content
    assert "user" in content
    assert "Read" in content
    assert "13:30:00" in content


def test_timeline_empty():
    view = empty_view()
    view.active_tab = 2
    assert "No timeline events." in view.view(100, 30)


def test_files_tab(view):
    for _ in range(3):
        view.update(right())
    content = view.view(100, 30)
    assert "Files" in content
    assert "login.go" in content


def test_files_tab_truncates_long_path():
    path = "/very/" + "d" * 60 + "/file.go"
    meta = FakeMeta(uuid="u", slug="s")
    view = SessionDetailView(None, meta, FakeDetail(file_activity=[FakeFileOp(path, "read", "Read")]))
    view.active_tab = 3
    content = view.view(100, 30)
    assert "..." + path[-47:] in content
    assert path not in content


def test_agents_tab(view):
    for _ in range(4):
        view.update(KeyMsg.runes_key("l"))
    content = view.view(100, 30)
    assert "Agents" in content
    assert "Explore" in content


def test_agents_tab_truncates_long_id():
    meta = FakeMeta(uuid="u", slug="s")
    detail = FakeDetail(subagents=[FakeAgent("a" * 25, "Plan", {"Read": 2, "Grep": 1})])
    view = SessionDetailView(None, meta, detail)
    view.active_tab = 4
    content = view.view(100, 30)
    assert "a" * 17 + "..." in content
    assert "a" * 18 not in content


def test_tools_tab(view):
    for _ in range(5):
        view.update(right())
    content = view.view(100, 30)
    assert "Tools" in content
    assert "Read" in content
    assert "Edit" in content
    assert content.index("Read ") < content.index("Edit ") < content.index("Bash ")


def test_tools_tab_empty():
    view = empty_view()
    view.active_tab = 5
    assert "No tool usage in this session." in view.view(100, 30)


def test_tab_wrapping(view):
    view.update(KeyMsg(KeyType.LEFT))
    assert view.active_tab == 5
    view.update(right())
    assert view.active_tab == 0


def test_scrolling(view):
    view.update(KeyMsg.runes_key("j"))
    assert view.scroll_y == 1
    view.update(KeyMsg.runes_key("k"))
    assert view.scroll_y == 0
    view.update(KeyMsg(KeyType.UP))
    assert view.scroll_y == 0


def test_chat_tab(view):
    content = view.view(100, 30)
    assert "Chat" in content
    assert "Fix the login bug" in content
    assert "▶ You:" in content
    assert "◀ Assistant:" in content
    assert "⚙" in content


def test_chat_tab_empty():
    content = empty_view().view(100, 30)
    assert "No chat messages" in content


def test_missing_detail():
    meta = FakeMeta(uuid="u", slug="s")
    view = SessionDetailView(None, meta, None)
    assert "No chat messages." in view.view(100, 30)
    view.active_tab = 3
    assert "No file activity." in view.view(100, 30)