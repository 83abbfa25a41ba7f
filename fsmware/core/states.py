# fsmware/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from fsmware.core.events import Event


class State:
    """
    Represents a named node of the state machine. Subclass it and override
    ``enter`` / ``leave`` to attach behaviour; the machine guarantees when
    they run, not what they do.

    States compare by identity and hash by name and identity, so two
    distinct instances sharing a name are still different states.
    """

    def __init__(self, name: str) -> None:
        """
        :param name: Unique name identifying this state within its machine.
        """
        self.name = name
        self.data: Dict[str, Any] = {}

    def enter(self, prev_state: Optional[State], event: Event) -> None:
        """
        Called once when a committed transition makes this state current.

        :param prev_state: The state being left.
        :param event: The event that triggered the transition.
        """

    def leave(self, event: Event) -> None:
        """
        Called once when a committed transition moves away from this state.

        :param event: The event that triggered the transition.
        """

    def __hash__(self) -> int:
        return hash((self.name, id(self)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return id(self) == id(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
