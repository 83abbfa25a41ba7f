# fsmware/core/events.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from types import MappingProxyType
from typing import Any, Mapping, Optional


class Event:
    """
    Represents a signal delivered to the machine. The machine matches the
    event's type against the transition table of its current state.

    Events are immutable: the detail mapping is copied on construction and
    exposed read-only, so every middleware in a chain sees the same values.
    """

    __slots__ = ("_type", "_detail")

    def __init__(self, type: str, detail: Optional[Mapping[str, Any]] = None) -> None:
        """
        Create an event identified by its type.

        :param type: A string naming the kind of event, matched against transitions.
        :param detail: Optional mapping of additional event data.
        """
        self._type = type
        self._detail = MappingProxyType(dict(detail)) if detail is not None else None

    @property
    def type(self) -> str:
        """The event type."""
        return self._type

    @property
    def detail(self) -> Optional[Mapping[str, Any]]:
        """Read-only event data, or None if the event carries none."""
        return self._detail

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self._type == other._type and self._detail == other._detail

    def __hash__(self) -> int:
        return hash(self._type)

    def __repr__(self) -> str:
        if self._detail is None:
            return f"Event({self._type!r})"
        return f"Event({self._type!r}, {dict(self._detail)!r})"


def create_event(type: str, detail: Optional[Mapping[str, Any]] = None) -> Event:
    """
    Build an event from a type and optional detail mapping.

    :param type: Event type.
    :param detail: Optional event data.
    """
    return Event(type, detail)
