"""Notification collector shared by commands, domain objects and handlers.

Objects do not inherit validation behaviour. Each one owns a
``Notifications`` instance and exposes it as ``notifications``; anything
with that attribute satisfies the ``Notifiable`` protocol and can be
merged into another collector.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class Notification:
    """A single validation failure for a field."""

    key: str
    message: str


class Notifications:
    """Ordered collection of notifications. Never raises."""

    def __init__(self) -> None:
        self._items: list[Notification] = []

    def add(self, key: str, message: str) -> None:
        self._items.append(Notification(key=key, message=message))

    def add_all(self, *sources: "Notifiable | Notifications") -> None:
        """Copy the current notifications of each source, in source order."""
        for source in sources:
            items = source if isinstance(source, Notifications) else source.notifications
            self._items.extend(list(items))

    def require(self, condition: bool, key: str, message: str) -> None:
        """Record ``message`` under ``key`` unless ``condition`` holds."""
        if not condition:
            self.add(key, message)

    def clear(self) -> None:
        self._items.clear()

    @property
    def is_valid(self) -> bool:
        return not self._items

    @property
    def is_invalid(self) -> bool:
        return bool(self._items)

    def keys(self) -> list[str]:
        return [item.key for item in self._items]

    def as_dicts(self) -> list[dict[str, str]]:
        return [{"key": item.key, "message": item.message} for item in self._items]

    def __iter__(self) -> Iterator[Notification]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Notifications({self._items!r})"


@runtime_checkable
class Notifiable(Protocol):
    """Anything that owns a notification collector."""

    notifications: Notifications
