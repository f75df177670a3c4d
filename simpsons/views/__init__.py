"""Screens for tools, subagents, projects and sessions, with formatting and data helpers."""