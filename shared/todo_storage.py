"""
Read-only access to the TodoMVC application's persisted list.

The application keeps its items in ``localStorage`` as a JSON list of
``{"id", "title", "completed"}`` records. The suite never writes that
key; it only reads it back after UI-driven changes, on every call, with
no caching between reads.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from playwright.sync_api import Page

logger = logging.getLogger(__name__)


class StorageFormatError(ValueError):
    """Raised when the stored value is not a JSON list of todo records."""


@dataclass(frozen=True)
class TodoRecord:
    """Snapshot of one persisted todo."""

    title: str
    completed: bool

    @classmethod
    def from_dict(cls, data: Any) -> "TodoRecord":
        if not isinstance(data, dict) or "title" not in data:
            raise StorageFormatError(f"Not a todo record: {data!r}")
        return cls(title=str(data["title"]), completed=bool(data.get("completed", False)))


def parse_saved_todos(raw: str | None) -> list[TodoRecord]:
    """
    Parse the raw storage value into records.

    Args:
        raw: The string stored under the key, or None if the key is unset.

    Returns:
        Records in stored order. An unset key yields an empty list.
    """
    if raw is None:
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise StorageFormatError(f"Stored todos are not valid JSON: {raw!r}") from exc
    if not isinstance(data, list):
        raise StorageFormatError(f"Stored todos are not a list: {raw!r}")
    return [TodoRecord.from_dict(entry) for entry in data]


def read_saved_todos(page: Page, key: str) -> list[TodoRecord]:
    """Read and parse the todos currently persisted by ``page``'s origin."""
    raw = page.evaluate("key => window.localStorage.getItem(key)", key)
    logger.debug("localStorage[%s] = %r", key, raw)
    return parse_saved_todos(raw)
