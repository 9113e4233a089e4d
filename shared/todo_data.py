"""Shared constants and types for the TodoMVC scenarios."""

from __future__ import annotations

from enum import Enum


TODO_ITEMS = (
    "buy some cheese",
    "feed the cat",
    "book a doctors appointment",
)


class TodoFilter(str, Enum):
    """Routing filters offered by the application footer."""

    ALL = "All"
    ACTIVE = "Active"
    COMPLETED = "Completed"

    @property
    def route(self) -> str:
        """URL hash fragment the application navigates to for this filter."""
        if self is TodoFilter.ALL:
            return "#/"
        return f"#/{self.value.lower()}"

    @classmethod
    def from_label(cls, label: "str | TodoFilter") -> "TodoFilter":
        """Accept a member or its link text (case-insensitive)."""
        if isinstance(label, cls):
            return label
        for member in cls:
            if member.value.lower() == str(label).strip().lower():
                return member
        raise ValueError(f"Unknown filter: {label!r}")


def counter_text(count: int) -> str:
    """Text the footer counter shows for ``count`` active items."""
    return f"{count} item left" if count == 1 else f"{count} items left"
