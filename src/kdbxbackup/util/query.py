"""Builders for Drive v3 `files.list` query strings."""

from __future__ import annotations

from .mime import FOLDER_MIME


def escape_query_value(value: str) -> str:
    """Escape a literal for use inside single quotes in a Drive query."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def build_folder_query(name: str, parent_id: str) -> str:
    return (
        f"mimeType = '{FOLDER_MIME}'"
        f" and name = '{escape_query_value(name)}'"
        f" and '{escape_query_value(parent_id)}' in parents"
        " and trashed = false"
    )


def build_child_query(name: str, parent_id: str) -> str:
    return (
        f"name = '{escape_query_value(name)}'"
        f" and '{escape_query_value(parent_id)}' in parents"
        " and trashed = false"
    )
